"""Result row shortcut binding tests."""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

import pytest

from cloud_toolbar.toolbar.shortcuts import index_for_key, modifier_label, shortcut_key


def test_digits_then_letters() -> None:
    assert [shortcut_key(i) for i in range(9)] == list("123456789")
    assert shortcut_key(9) == "B"
    assert shortcut_key(10) == "D"
    assert shortcut_key(30) == "Z"
    assert shortcut_key(31) is None
    assert shortcut_key(-1) is None


@pytest.mark.parametrize("key", ["A", "C", "V", "X"])
def test_clipboard_letters_are_never_bound(key: str) -> None:
    assert key not in [shortcut_key(i) for i in range(40)]
    assert index_for_key(key) is None


def test_index_for_key_inverts_shortcut_key() -> None:
    for index in range(31):
        assert index_for_key(shortcut_key(index)) == index
    assert index_for_key("b") == 9
    assert index_for_key("0") is None
    assert index_for_key("") is None
    assert index_for_key("10") is None


def test_modifier_label() -> None:
    assert modifier_label("darwin") == "⌘"
    assert modifier_label("linux") == "Ctrl"
    assert modifier_label("win32") == "Ctrl"

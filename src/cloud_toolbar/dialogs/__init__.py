"""Dialogs used by the main window."""

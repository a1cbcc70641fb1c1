"""Backend capability tables for the sync engine."""
# Author: Rich Lewis - GitHub: @RichLewis007

DEFAULT_HOST_URL = "http://localhost:5572"

# Ordered so that "sftp" is found before its substring "ftp"
SERVE_TYPES: tuple[str, ...] = (
    "http",
    "webdav",
    "sftp",
    "ftp",
    "restic",
    "dlna",
    "nfs",
    "s3",
)

SUPPORTS_CLEANUP: frozenset[str] = frozenset(
    {
        "s3",
        "b2",
        "box",
        "drive",
        "onedrive",
        "internetarchive",
        "jottacloud",
        "mailru",
        "mega",
        "oos",
        "pcloud",
        "pikpak",
        "putio",
        "qingstor",
        "protondrive",
        "seafile",
        "yandex",
    }
)

SUPPORTS_PURGE: frozenset[str] = frozenset(
    {
        "b2",
        "box",
        "drive",
        "dropbox",
        "jottacloud",
        "koofr",
        "mailru",
        "mega",
        "onedrive",
        "opendrive",
        "pcloud",
        "pikpak",
        "putio",
        "seafile",
        "sharefile",
        "yandex",
        "zoho",
    }
)

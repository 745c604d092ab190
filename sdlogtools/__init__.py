"""Tools for SD card data-logger files and FAT short-name directory entries."""

__version__ = "0.1.0"

__all__ = [
    "bintocsv",
    "records",
    "checks",
    "shortname",
    "fatprint",
    "dirent",
    "timestamps",
    "textio",
]
"""File metadata, icons, size and date formatting, and sorting for a directory lister."""

__version__ = "0.1.0"
"""Comment commands, front matter, build options, lists, tables and image attributes for terminal presentations."""

__version__ = "0.1.0"

__all__ = [
    "commands",
    "images",
    "lists",
    "metadata",
    "options",
    "tables",
]
"""Building blocks of a notification daemon: log levels, markup, icons, status and a client parser."""

__version__ = "1.4.1"

__all__ = [
    "dunstify",
    "icon",
    "log",
    "markup",
    "status",
]
"""epochctl: Unix epoch timestamp converter."""

__version__ = "0.1.0"

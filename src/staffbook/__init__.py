"""staffbook — employee address book CLI."""

__version__ = "0.4.0"

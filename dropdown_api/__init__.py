"""Dynamic dropdown feed for Duda collections."""

__version__ = "0.1.0"

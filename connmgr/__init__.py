"""connmgr - a terminal connection manager."""

__version__ = "0.1.0"

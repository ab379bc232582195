"""Runtime support library for the VoidScript C backend."""

__version__ = "0.1.0"

"""Compact printf-style formatting, a bounded FIFO queue and IPv4 TCP helpers."""

__version__ = "1.0.0"
__all__ = ["numfmt", "printf", "queue", "netutil"]
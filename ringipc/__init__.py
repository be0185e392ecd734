"""Producer and consumer threads over a bounded ring of CRC-16 checked messages."""

__version__ = "0.1.0"
__all__ = ["__version__"]
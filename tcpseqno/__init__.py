"""32-bit wrapping TCP sequence numbers and their conversion to absolute positions."""

__version__ = "0.1.0"
__all__ = ["wrapping"]
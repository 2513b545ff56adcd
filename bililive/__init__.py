"""Typed bilibili live-room broadcast messages and a token-bucket rate limiter."""

__version__ = "0.1.0"
__all__ = ["__version__"]
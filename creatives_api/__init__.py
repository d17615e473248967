"""REST backend for a social network of creative professionals."""

__version__ = "0.1.0"

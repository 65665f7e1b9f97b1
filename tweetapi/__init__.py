"""Data models, query options and response decoding for the Twitter v2 API."""

__version__ = "0.1.0"
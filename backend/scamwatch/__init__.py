"""Scamwatch: synthetic scam-intelligence generator with a dashboard API."""

__version__ = "0.1.0"
__author__ = "Scamwatch Team"

__all__ = ["__version__", "__author__"]

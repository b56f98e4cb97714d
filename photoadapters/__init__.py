"""Matching, metadata, naming and writing helpers for importing photos from folders and Google Photos takeouts."""

__version__ = "0.1.0"
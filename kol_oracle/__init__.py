"""Keyword oracle for KOL posts fetched from the Mainline API."""

__version__ = "0.1.0"

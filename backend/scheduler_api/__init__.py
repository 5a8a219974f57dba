"""Scheduler API - doctor records service."""

__version__ = "1.0.0"

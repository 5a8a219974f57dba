"""
Unit tests package.

Contains isolated tests for validators, the repository (against an
in-memory database), controllers with a mocked repository, and the
configuration and logging helpers.
"""

"""
Integration tests package.

Contains end-to-end tests that drive the Flask app through its HTTP
routes with a real SQLAlchemy repository on in-memory SQLite.
"""

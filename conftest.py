"""Puts the project root on the path, so tests can import the package."""

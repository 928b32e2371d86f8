"""Auth and document metadata backend for a collaborative editor."""

__version__ = "1.0.0"

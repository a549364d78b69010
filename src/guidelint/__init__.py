"""Style-guide conformance checker for JavaScript and PostgreSQL."""

__version__ = "0.1.0"

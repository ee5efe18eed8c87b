"""Permission-enforcing directory object layer."""

__version__ = "0.1.0"

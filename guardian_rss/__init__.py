"""Guardian RSS gateway."""

__version__ = "1.0.0"

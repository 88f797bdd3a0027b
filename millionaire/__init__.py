"""A terminal quiz game in the style of 'Who Wants to Be a Millionaire'."""

__version__ = "0.1.0"
__all__ = ["__version__"]
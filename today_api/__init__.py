"""Today API: what is special about today's date."""

__version__ = "1.0.0"

"""Weather configuration, fetching and terminal rendering of current conditions."""

__version__ = "0.1.0"
"""Distribution version of buildver."""

__version__ = "1.0.0"

"""City Info API - cities and their points of interest."""

__version__ = "1.0.0"

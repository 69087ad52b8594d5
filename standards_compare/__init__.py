"""Standards Compare - topic comparison of project-management standards."""

__version__ = "1.0.0"

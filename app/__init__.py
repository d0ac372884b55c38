"""Daily Menu API: daily meal menu, per-user meal ratings, and menu requests."""

__version__ = "0.1.0"

"""Kifu Dojo - build, memorize and record Go positions."""

__version__ = "1.1.0"

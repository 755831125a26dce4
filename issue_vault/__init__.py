"""Export GitHub issues into a cross-linked offline note vault."""

__version__ = "0.1.0"

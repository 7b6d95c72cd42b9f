"""todoview - grouped views of a plain-text todo file."""

__version__ = "0.1.0"

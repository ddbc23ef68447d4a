"""react-lens — React codebase health analyzer with AI fix suggestions."""

__version__ = "0.1.0"

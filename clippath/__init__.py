"""SVG path → CSS clip-path converter."""

__version__ = "0.1.0"

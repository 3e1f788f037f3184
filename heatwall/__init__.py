"""heatwall - calendar activity heatmap layout engine."""

__version__ = "1.0.0"

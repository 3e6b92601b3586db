"""conectl — build and serve layered ice cream cones from unordered orders."""

__version__ = "0.1.0"

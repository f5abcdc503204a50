"""Number Sorter: a pygame visualizer for an animated, direction-alternating quicksort."""

__version__ = "1.0.0"

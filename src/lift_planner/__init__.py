"""lift-planner: percentage-based training weights and barbell plate loading."""

__version__ = "0.1.0"

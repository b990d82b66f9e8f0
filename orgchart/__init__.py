"""orgchart - employee hierarchy and salary report CLI."""

__version__ = "0.1.0"

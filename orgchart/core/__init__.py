"""Domain model for employee hierarchies."""

"""Report commands and their registry."""

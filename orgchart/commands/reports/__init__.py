"""Report commands over a loaded employee hierarchy."""

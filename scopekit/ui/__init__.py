"""Rich rendering helpers for the scopekit CLI."""

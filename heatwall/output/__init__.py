"""Output package - terminal formatting and grid rendering."""

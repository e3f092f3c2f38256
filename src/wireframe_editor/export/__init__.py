"""Plan rendering."""

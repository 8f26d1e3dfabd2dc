"""Parsing and lookup core, free of any UI or media dependency."""

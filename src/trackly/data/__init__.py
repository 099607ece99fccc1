"""Packaged data files (holiday tables)."""

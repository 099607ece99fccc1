"""Entrypoints for TRACKLY (currently the ``trackly`` CLI)."""

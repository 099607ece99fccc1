"""TRACKLY command-line interface."""

"""Command-line interface for dotver."""

"""Applies extracted reel templates to new content."""

"""Reel template extraction pipeline."""

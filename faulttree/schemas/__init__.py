"""Packaged JSON schemas for fault tree model files."""

"""Presentation collaborators."""

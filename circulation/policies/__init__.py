"""Substitutable fine and notification policies."""

"""Pygame front end for Falling Blocks."""

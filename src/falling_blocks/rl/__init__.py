"""Agents that play Falling Blocks through the gymnasium environment."""

"""Difficulty configuration."""

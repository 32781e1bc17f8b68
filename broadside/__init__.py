"""Broadside: Battleship with a seeded computer opponent."""

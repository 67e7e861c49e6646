"""Breadth-first search for fair ranger station rotations."""

"""Core hashing and configuration for fixturehash."""

"""Command line interface for fixturehash."""

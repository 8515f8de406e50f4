"""Command line interface for the Tether SDK."""

"""Command line interface for ridelog."""

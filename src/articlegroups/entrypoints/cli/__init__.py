"""Command-line interface for articlegroups."""

"""Command line interface for ignorekit."""

"""Command line interface for SpliceKit."""

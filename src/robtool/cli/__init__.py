"""Command line interface for robtool."""

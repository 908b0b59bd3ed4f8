"""Logging setup shared by the command line entry points."""

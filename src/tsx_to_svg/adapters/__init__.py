"""Filesystem adapters implementing the application ports."""

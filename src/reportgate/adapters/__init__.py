"""Adapters implementing the reportgate core ports."""

"""Outbound adapters implementing the core ports."""

"""Inbound adapters: command line and HTTP API."""

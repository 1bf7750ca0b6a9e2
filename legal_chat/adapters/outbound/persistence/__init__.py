"""Persistence adapters for the document library."""

"""Core of the legal chat assistant: domain models, ports and services."""

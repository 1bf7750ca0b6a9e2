"""HTTP API for the legal chat assistant."""

"""Adapters connecting the core to files, storage, the model provider and users."""

"""File text extraction adapters."""

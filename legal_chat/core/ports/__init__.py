"""Ports to the external collaborators: model, extraction and persistence."""

from .extraction_port import TextExtractorPort
from .llm_port import ChatModelPort
from .persistence_port import DocumentStorePort

__all__ = ["ChatModelPort", "TextExtractorPort", "DocumentStorePort"]

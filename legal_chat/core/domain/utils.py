"""Text helpers shared by the domain and the adapters.

Text handling contract
----------------------
* File names and extracted text have BOM markers removed at the boundary.
* Document names are NFC-composed when stored, since a name is a document's identity.
* Unicode is NFKC-normalized where text is compared (rank classification), so
  decomposed Vietnamese diacritics produced by some file systems match the
  precomposed keywords.
* Document content handed to the model is otherwise passed through verbatim.
"""

import unicodedata


def clean_text(text: str, *, normalize: bool = True) -> str:
    """Remove BOM / replacement markers and optionally NFKC-normalize text.

    Args:
        text: Input text that may contain BOM or special characters.
        normalize: Whether to apply NFKC normalization.

    Returns:
        Cleaned text.
    """
    if not text:
        return ""

    cleaned = text.replace("\ufeff", "").replace("\ufffd", "")
    if normalize:
        cleaned = unicodedata.normalize("NFKC", cleaned)
    return cleaned


def is_blank(text: str | None) -> bool:
    """True for None, empty, or whitespace-only strings."""
    return not text or not text.strip()


def clean_name(name: str) -> str:
    """Canonical display form of a document name.

    Names are NFC-composed so the same file uploaded from a file system that
    stores decomposed diacritics keeps its identity.
    """
    return unicodedata.normalize("NFC", clean_text(name, normalize=False)).strip()

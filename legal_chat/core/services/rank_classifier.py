"""Legal-authority ranking of documents by their file name.

Vietnamese legal instruments form a 15-tier hierarchy of binding force
(Hiến pháp > Luật > Pháp lệnh > ... > Thông tư > local decisions). The tier of
an uploaded document is inferred from its name with an ordered table of rules,
first match wins. Lower numbers mean higher authority.

Rank is never stored on a document; it is recomputed whenever ordering is
needed so that a change to ``RANK_RULES`` applies to every document at once.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from ..domain.utils import clean_text

NamePredicate = Callable[[str], bool]

UNCLASSIFIED_DECISION = 16
UNRANKED = 99

# Word boundaries for standalone-token rules; underscores become spaces in normalize_name
_TOKEN_SEPARATOR = r"\s"


def _contains(*needles: str) -> NamePredicate:
    """Match when any needle occurs as a substring."""
    return lambda name: any(needle in name for needle in needles)


def _token(word: str) -> NamePredicate:
    """Match ``word`` only as a standalone token, not inside a longer word."""
    pattern = re.compile(rf"(?:^|{_TOKEN_SEPARATOR}){re.escape(word)}(?:{_TOKEN_SEPARATOR}|$)")
    return lambda name: pattern.search(name) is not None


def _either(*predicates: NamePredicate) -> NamePredicate:
    return lambda name: any(predicate(name) for predicate in predicates)


def _both(*predicates: NamePredicate) -> NamePredicate:
    return lambda name: all(predicate(name) for predicate in predicates)


_RESOLUTION = _contains("nghị quyết")
_DECISION = _contains("quyết định")
_PROVINCE = _contains("tỉnh")
_PEOPLES_COUNCIL = _contains("hđnd", "hội đồng nhân dân")
_PEOPLES_COMMITTEE = _contains("ubnd", "ủy ban nhân dân")


@dataclass(frozen=True)
class RankRule:
    """One row of the classification table.

    Attributes:
        tier: Rank assigned when the rule matches.
        description: What kind of instrument the rule recognizes.
        matches: Predicate over the cleaned, lower-cased name.
    """

    tier: int
    description: str
    matches: NamePredicate


RANK_RULES: tuple[RankRule, ...] = (
    RankRule(1, "Hiến pháp", _contains("hiến pháp")),
    RankRule(
        2,
        "Bộ luật, luật, nghị quyết của Quốc hội",
        _either(
            _contains("bộ luật"),
            _token("luật"),
            _both(_RESOLUTION, _contains("quốc hội")),
        ),
    ),
    RankRule(
        3,
        "Pháp lệnh, nghị quyết của Ủy ban thường vụ Quốc hội",
        _either(
            _contains("pháp lệnh"),
            _both(_RESOLUTION, _contains("ủy ban thường vụ", "ubtvqh")),
        ),
    ),
    RankRule(
        4,
        "Lệnh, quyết định của Chủ tịch nước",
        _either(_token("lệnh"), _both(_DECISION, _contains("chủ tịch nước"))),
    ),
    RankRule(5, "Nghị định của Chính phủ", _contains("nghị định", "/nđ-cp")),
    RankRule(
        6,
        "Quyết định của Thủ tướng Chính phủ",
        _both(_DECISION, _contains("thủ tướng", "/qđ-ttg")),
    ),
    RankRule(
        7,
        "Nghị quyết của Hội đồng Thẩm phán TANDTC",
        _both(_RESOLUTION, _contains("hội đồng thẩm phán")),
    ),
    RankRule(8, "Thông tư", _contains("thông tư", "/tt-")),
    # Ministerial price decisions bind like a circular and outrank local documents
    RankRule(
        8,
        "Quyết định của Bộ trưởng Bộ Công Thương",
        _both(_DECISION, _contains("bộ công thương", "/qđ-bct")),
    ),
    RankRule(
        9,
        "Nghị quyết của HĐND cấp tỉnh",
        _both(_RESOLUTION, _PEOPLES_COUNCIL, _PROVINCE),
    ),
    RankRule(
        10,
        "Quyết định của UBND cấp tỉnh",
        _both(_DECISION, _PEOPLES_COMMITTEE, _PROVINCE),
    ),
    RankRule(UNCLASSIFIED_DECISION, "Quyết định chưa xác định cấp ban hành", _DECISION),
)

RANK_LABELS: dict[int, str] = {
    1: "Hiến pháp",
    2: "Luật/NQ Quốc hội",
    3: "Pháp lệnh/NQ UBTVQH",
    4: "Lệnh/QĐ CTN",
    5: "Nghị định",
    6: "QĐ Thủ tướng",
    7: "NQ HĐTP TANDTC",
    8: "Thông tư/QĐ Bộ",
    9: "NQ HĐND tỉnh",
    10: "QĐ UBND tỉnh",
    UNCLASSIFIED_DECISION: "Quyết định khác",
}

FALLBACK_LABEL = "Văn bản khác"


def normalize_name(name: str) -> str:
    """Prepare a document name for rule matching."""
    # Underscores stand in for spaces in file names; hyphens and slashes stay
    # because number suffixes such as "/nđ-cp" rely on them
    lowered = clean_text(name).lower().replace("_", " ")
    # Both tone-mark placements are in common use
    return lowered.replace("uỷ", "ủy")


def classify(name: str) -> int:
    """Return the legal-authority tier for a document name.

    Args:
        name: Display name of the document, usually its file name.

    Returns:
        Tier from ``RANK_RULES``, or ``UNRANKED`` (99) when no rule matches.
    """
    normalized = normalize_name(name)
    for rule in RANK_RULES:
        if rule.matches(normalized):
            return rule.tier
    return UNRANKED


def rank_label(rank: int) -> str:
    """Short display label for a tier; unknown tiers get a generic label."""
    return RANK_LABELS.get(rank, FALLBACK_LABEL)

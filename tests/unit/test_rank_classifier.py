"""Unit tests for legal-rank classification of document names."""

import unicodedata

import pytest

from legal_chat.core.services.rank_classifier import (
    FALLBACK_LABEL,
    RANK_LABELS,
    RANK_RULES,
    UNCLASSIFIED_DECISION,
    UNRANKED,
    classify,
    normalize_name,
    rank_label,
)

pytestmark = pytest.mark.unit


class TestClassify:
    """Tier assignment by name."""

    @pytest.mark.parametrize(
        ("name", "tier"),
        [
            ("Hiến pháp 2013.pdf", 1),
            ("Bộ luật Lao động 2019.docx", 2),
            ("Luật Giáo dục.pdf", 2),
            ("Luật_Điện_lực_2024.pdf", 2),
            ("Nghị quyết 55 của Quốc hội.pdf", 2),
            ("Pháp lệnh Chi phí tố tụng.pdf", 3),
            ("Pháp_lệnh_Thuế_2020.pdf", 3),
            ("Pháp-lệnh-phí.pdf", UNRANKED),
            ("Nghị quyết 1023-NQ-UBTVQH.docx", 3),
            ("Lệnh số 05-2024.pdf", 4),
            ("Quyết định của Chủ tịch nước về đặc xá.pdf", 4),
            ("Nghị định 72-2025.pdf", 5),
            ("Số 72/2025/NĐ-CP.pdf", 5),
            ("Quyết định 24-2017 của Thủ tướng.pdf", 6),
            ("Quyết định 28/2014/QĐ-TTg.pdf", 6),
            ("Nghị quyết của Hội đồng Thẩm phán về án treo.pdf", 7),
            ("Thông tư 13.pdf", 8),
            ("Số 16/2014/TT-BCT.pdf", 8),
            ("Quyết định 1279/QĐ-BCT.pdf", 8),
            ("Quyết định của Bộ Công Thương về giá điện.docx", 8),
            ("Nghị quyết HĐND tỉnh Bình Dương.pdf", 9),
            ("Quyết định UBND tỉnh Đồng Nai.pdf", 10),
            ("Quyết định 05-2020-QĐ-UBND huyện.pdf", UNCLASSIFIED_DECISION),
            ("Công văn 123.pdf", UNRANKED),
        ],
    )
    def test_known_names(self, name, tier):
        assert classify(name) == tier

    @pytest.mark.parametrize("name", ["LUẬT GIÁO DỤC.PDF", "luật giáo dục.pdf", "Luật Giáo Dục.pdf"])
    def test_case_insensitive(self, name):
        assert classify(name) == 2

    def test_keyword_anywhere_in_name(self):
        assert classify("Bản sao - Thông tư 13 (hợp nhất).pdf") == 8

    def test_law_must_be_standalone_token(self):
        """'luật' inside a longer word is not a law."""
        assert classify("Bảng quyluật giá.docx") == UNRANKED

    def test_old_style_tone_mark_is_accepted(self):
        assert classify("Quyết định của Uỷ ban nhân dân tỉnh Nghệ An.pdf") == 10

    def test_decomposed_unicode_is_normalized(self):
        decomposed = unicodedata.normalize("NFD", "Luật Giáo dục.pdf")
        assert classify(decomposed) == 2

    def test_bom_in_name_is_ignored(self):
        assert classify("\ufeffHiến pháp.pdf") == 1

    def test_provincial_resolution_needs_province(self):
        assert classify("Nghị quyết HĐND huyện.pdf") == UNRANKED

    @pytest.mark.parametrize("name", ["", "   ", "a.txt", "12345", "???"])
    def test_unmatched_names_are_unranked(self, name):
        assert classify(name) == UNRANKED

    def test_deterministic(self):
        name = "Quyết định 1279/QĐ-BCT.pdf"
        assert {classify(name) for _ in range(20)} == {8}


class TestRuleTable:
    """Shape of the ordered rule table."""

    def test_rules_are_in_tier_order(self):
        tiers = [rule.tier for rule in RANK_RULES]
        assert tiers == sorted(tiers)

    def test_every_rule_tier_has_a_label(self):
        for rule in RANK_RULES:
            assert rule.tier in RANK_LABELS, rule.description

    def test_first_matching_rule_wins(self):
        """A law about decrees is still a law."""
        name = normalize_name("Luật ban hành nghị định.pdf")
        matching = [rule.tier for rule in RANK_RULES if rule.matches(name)]
        assert matching[0] == 2
        assert 5 in matching
        assert classify("Luật ban hành nghị định.pdf") == 2

    def test_normalize_name(self):
        assert normalize_name("\ufeffQuyết Định Uỷ Ban") == "quyết định ủy ban"

    def test_normalize_name_treats_underscores_as_spaces(self):
        assert normalize_name("Pháp_lệnh_Thuế.pdf") == "pháp lệnh thuế.pdf"
        assert normalize_name("Số 72/2025/NĐ-CP.pdf") == "số 72/2025/nđ-cp.pdf"


class TestRankLabel:
    """Display labels."""

    def test_known_tiers(self):
        assert rank_label(1) == "Hiến pháp"
        assert rank_label(2) == "Luật/NQ Quốc hội"
        assert rank_label(8) == "Thông tư/QĐ Bộ"

    @pytest.mark.parametrize("rank", [UNRANKED, 0, -1, 11, 1000])
    def test_unknown_tiers_fall_back(self, rank):
        assert rank_label(rank) == FALLBACK_LABEL

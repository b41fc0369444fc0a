import pytest

from patterns import HEADING_PATTERNS, TITLE_PATTERNS


def _matches(text):
    """(kind, captured text) for every heading rule hit, in catalog order."""
    return [(rule.kind, m.group(1).strip()) for rule in HEADING_PATTERNS for m in rule.regex.finditer(text)]


def _kinds(text):
    return {kind for kind, _ in _matches(text)}


def test_numbered_levels_use_separate_rules():
    assert HEADING_PATTERNS[0].regex.search("1. Introduction").group(1) == "1. Introduction"
    assert HEADING_PATTERNS[0].regex.search("1.1 Background") is None
    assert HEADING_PATTERNS[1].regex.search("1.1 Background").group(1) == "1.1 Background"
    assert HEADING_PATTERNS[2].regex.search("1.2.3. Scope Details").group(1) == "1.2.3. Scope Details"


def test_numbered_requires_capital_or_cjk_start():
    assert _matches("3. see the appendix") == []
    assert ("numbered", "2. Étude de cas") in _matches("2. Étude de cas")
    assert ("numbered", "4. 背景と目的") in _matches("4. 背景と目的")


def test_match_never_spans_lines():
    # "EXECUTIVE" alone is too short for the all-caps rule
    assert _matches("EXECUTIVE\nSUMMARY REPORT") == [
        ("all_caps", "SUMMARY REPORT"),
        ("emphasized", "SUMMARY REPORT"),
    ]


def test_leading_and_trailing_blanks_are_outside_the_capture():
    hits = _matches("   1. Introduction   \n")
    assert hits == [("numbered", "1. Introduction")]


def test_roman_numeral_heading():
    assert "roman" in _kinds("IV. Results Overview")


@pytest.mark.parametrize("line", [
    "Chapter 2: System Design",
    "Chapitre 3: Méthodes employées",
    "kapitel 2 Grundlagen der Analyse",
    "Section 4 Evaluation Setup",
    "Abschnitt 1. Einleitung",
    "Part 2 Implementation Notes",
    "Partie 1 : Contexte général",
    "Teil 3 Ergebnisse",
])
def test_multilingual_keyword_headings(line):
    assert "keyword" in _kinds(line)


@pytest.mark.parametrize("line", [
    "第1章 はじめに",
    "第十二節 実験結果",
    "２．背景と目的",
    "3.1 システム構成",
])
def test_japanese_headings(line):
    assert ("japanese", line) in _matches(line)


def test_all_caps_and_emphasized_overlap():
    assert _matches("EXECUTIVE SUMMARY") == [
        ("all_caps", "EXECUTIVE SUMMARY"),
        ("emphasized", "EXECUTIVE SUMMARY"),
    ]


def test_emphasized_length_bounds():
    assert _kinds("Project Overview") == {"emphasized"}
    assert _matches("Too short") == []
    assert _matches("This line ends with a period.") == []


def test_title_patterns():
    mixed_case, japanese, all_caps = (rule.regex for rule in TITLE_PATTERNS)
    assert mixed_case.fullmatch("Understanding Heuristic Outlines")
    assert mixed_case.fullmatch("Annual Report 2024") is None
    assert japanese.fullmatch("機械学習による文書構造解析")
    assert japanese.fullmatch("概要です") is None
    assert all_caps.fullmatch("ANNUAL REPORT ON WIDGETS")
    assert all_caps.fullmatch("SHORT CAPS") is None


def test_numbered_body_minimum_length():
    # Capital plus at least four more characters
    assert _matches("1. Intro") == [("numbered", "1. Intro")]
    assert _matches("1. Int") == []

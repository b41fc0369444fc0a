"""
Pattern catalog for heading and title detection.
Every pattern works on plain page text, one line at a time.
"""
import re
from typing import List, NamedTuple

# --- Character Classes ---
# Horizontal blanks only, so a match never runs across a line break.
BLANK_CHARS = " \t\u3000"
BLANK = f"[{BLANK_CHARS}]"
# Hiragana, Katakana, CJK unified ideographs
KANA_KANJI = "\u3040-\u309F\u30A0-\u30FF\u4E00-\u9FAF"
# First character of a heading body: Latin capital, Latin-1 accented letter, Kana or Kanji
HEADING_START = "[A-Z\u00C0-\u00FF" + KANA_KANJI + "]"
JAPANESE_NUMERALS = "\uFF10-\uFF190-9一二三四五六七八九十百千万"

# \d and \s stay ASCII; full-width digits are listed explicitly where wanted.
_LINE_FLAGS = re.MULTILINE | re.ASCII


class PatternRule(NamedTuple):
    kind: str
    regex: re.Pattern


def _line(body: str, flags: int = 0) -> re.Pattern:
    """Compile a full-line pattern capturing `body` as group 1."""
    return re.compile(rf"^{BLANK}*({body}){BLANK}*$", _LINE_FLAGS | flags)


# --- Heading Patterns (priority order) ---
HEADING_PATTERNS: List[PatternRule] = [
    # Numbered hierarchies: "1. Intro", "1.2 Scope", "1.2.3. Details"
    PatternRule("numbered", _line(rf"\d+\.?{BLANK}+{HEADING_START}[^\n]{{4,100}}")),
    PatternRule("numbered", _line(rf"\d+\.\d+\.?{BLANK}+{HEADING_START}[^\n]{{4,100}}")),
    PatternRule("numbered", _line(rf"\d+\.\d+\.\d+\.?{BLANK}+{HEADING_START}[^\n]{{4,100}}")),

    # Roman numerals: "IV. Results"
    PatternRule("roman", _line(rf"[IVX]+\.{BLANK}*{HEADING_START}[^\n]{{4,80}}")),

    # Keyword prefixes in English, French, German and Japanese
    PatternRule("keyword", _line(
        rf"(?:Chapter|Chapitre|Kapitel|章){BLANK}*\d+[:.{BLANK_CHARS}]*{HEADING_START}[^\n]{{4,80}}",
        re.IGNORECASE)),
    PatternRule("keyword", _line(
        rf"(?:Section|Abschnitt|セクション){BLANK}*\d+[:.{BLANK_CHARS}]*{HEADING_START}[^\n]{{4,80}}",
        re.IGNORECASE)),
    PatternRule("keyword", _line(
        rf"(?:Part|Partie|Teil|パート){BLANK}*\d+[:.{BLANK_CHARS}]*{HEADING_START}[^\n]{{4,80}}",
        re.IGNORECASE)),

    # Japanese unit markers: "第1章 はじめに", "２節 実験結果"
    PatternRule("japanese", _line(
        rf"第?[{JAPANESE_NUMERALS}]+[章節項部編]{BLANK}*[{KANA_KANJI}]{{3,50}}")),
    # Japanese dotted numbering: "１．背景と目的", "2.1 システム構成"
    PatternRule("japanese", _line(rf"[０-９0-9]+[．.][０-９0-9]*{BLANK}*[{KANA_KANJI}]{{3,50}}")),

    # All-caps lines
    PatternRule("all_caps", _line(r"[A-Z][A-Z \t]{10,80}")),

    # Low-confidence catch-all for short mixed-case lines
    PatternRule("emphasized", _line(r"[A-Z][A-Za-z \t]{8,60}[A-Za-z]")),
]

# --- Title Patterns (matched against single trimmed lines) ---
TITLE_PATTERNS: List[PatternRule] = [
    PatternRule("mixed_case", _line(r"[A-Z][A-Za-z \t]{10,80}[A-Za-z]")),
    PatternRule("japanese", _line(rf"[{KANA_KANJI}]{{5,80}}")),
    PatternRule("all_caps", _line(r"[A-Z][A-Z \t]{15,80}")),
]

# --- Level Classification ---
NUMBERING_L3 = re.compile(r"^\d+\.\d+\.\d+", re.ASCII)
NUMBERING_L2 = re.compile(r"^\d+\.\d+", re.ASCII)
NUMBERING_L1 = re.compile(r"^\d+\.", re.ASCII)
CHAPTER_OR_PART_RX = re.compile(r"^(chapter|part)\s+\d+", re.ASCII)
SECTION_RX = re.compile(r"^section\s+\d+", re.ASCII)
JAPANESE_MAJOR_UNITS = ("章", "編", "部")
JAPANESE_MINOR_UNITS = ("節", "項")
ALL_CAPS_RX = re.compile(r"^[A-Z][A-Z\s]+$", re.ASCII)

# --- Title Rejection ---
LEADING_NUMBER_DOT_RX = re.compile(r"^\d+\.", re.ASCII)
HEADER_KEYWORD_PREFIXES = ("chapter", "section", "part")

# --- False Positives ---
COMMON_FALSE_POSITIVES = {"table of contents", "references", "bibliography", "index"}
DIGIT_RX = re.compile(r"[0-9]")
ALL_DIGITS_RX = re.compile(r"[0-9]+")

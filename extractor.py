#!/usr/bin/env python3
"""
PDF outline extraction module.
Implements the pattern-based title and heading detection pipeline.
"""
import fitz  # PyMuPDF
import re
import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import List, Dict, Iterable, Sequence

import config
from patterns import (
    HEADING_PATTERNS, TITLE_PATTERNS,
    NUMBERING_L1, NUMBERING_L2, NUMBERING_L3,
    CHAPTER_OR_PART_RX, SECTION_RX, ALL_CAPS_RX,
    JAPANESE_MAJOR_UNITS, JAPANESE_MINOR_UNITS,
    LEADING_NUMBER_DOT_RX, HEADER_KEYWORD_PREFIXES,
    COMMON_FALSE_POSITIVES, DIGIT_RX, ALL_DIGITS_RX,
)

# Set up logging
logger = logging.getLogger(__name__)

H1, H2, H3 = "H1", "H2", "H3"
HEADING_LEVELS = (H1, H2, H3)
DEFAULT_TITLE = "Document"


# --- Data Model ---
@dataclass(frozen=True)
class PageText:
    page_number: int  # 1-based
    text: str


@dataclass(frozen=True)
class HeadingCandidate:
    level: str
    text: str
    page: int


@dataclass(frozen=True)
class Heading:
    level: str
    text: str
    page: int

    def to_dict(self) -> Dict:
        return {'level': self.level, 'text': self.text, 'page': self.page}


@dataclass
class DocumentOutline:
    title: str
    headings: List[Heading] = field(default_factory=list)

    def to_dict(self) -> Dict:
        """JSON-ready form: {"title": ..., "outline": [...]}."""
        return {
            'title': self.title,
            'outline': [heading.to_dict() for heading in self.headings]
        }


# --- Text Helpers ---
def clean_text(text: str) -> str:
    return re.sub(r"\s+", " ", text or "").strip()


def is_likely_header(text: str) -> bool:
    """Checks if text reads like a section heading rather than a document title."""
    lower = text.lower()
    return bool(LEADING_NUMBER_DOT_RX.match(text)) or lower.startswith(HEADER_KEYWORD_PREFIXES)


def is_common_false_positive(text: str) -> bool:
    """Checks for heading-shaped boilerplate: page markers, standard back-matter names, bare numbers."""
    lower = text.lower()
    return (("page" in lower and bool(DIGIT_RX.search(lower)))
            or lower in COMMON_FALSE_POSITIVES
            or bool(ALL_DIGITS_RX.fullmatch(lower))
            or len(lower) < 3)


def determine_heading_level(text: str) -> str:
    """
    Map a heading's surface form to H1/H2/H3.
    Numbering depth wins, then keyword prefixes, then Japanese unit markers,
    then capitalization, and finally raw length.
    """
    if NUMBERING_L3.match(text):
        return H3
    if NUMBERING_L2.match(text):
        return H2
    if NUMBERING_L1.match(text):
        return H1

    lower = text.lower()
    if CHAPTER_OR_PART_RX.match(lower):
        return H1
    if SECTION_RX.match(lower):
        return H2

    if any(marker in text for marker in JAPANESE_MAJOR_UNITS):
        return H1
    if any(marker in text for marker in JAPANESE_MINOR_UNITS):
        return H2

    if ALL_CAPS_RX.match(text):
        return H1

    if len(text) > 40:
        return H1
    if len(text) > 25:
        return H2
    return H3


class PDFOutlineExtractor:
    """Main class for extracting outlines from per-page document text."""

    def __init__(self, title_page_limit: int = 3):
        self.title_page_limit = title_page_limit
        # Title line bounds are exclusive
        self.title_min_line_length = 10
        self.title_max_line_length = 100
        self.title_min_length = 10
        # Raw candidate bounds are exclusive
        self.candidate_min_length = 5
        self.candidate_max_length = 150
        # Cleaned heading bounds are inclusive
        self.heading_min_length = 5
        self.heading_max_length = 120
        self.duplicate_page_radius = 1

    def extract_title(self, pages: Sequence[PageText]) -> str:
        """Return the first title-shaped line of the leading pages, or "Document"."""
        for page in pages[:self.title_page_limit]:
            for line in page.text.split("\n"):
                line = line.strip()
                if not (self.title_min_line_length < len(line) < self.title_max_line_length):
                    continue
                for rule in TITLE_PATTERNS:
                    match = rule.regex.fullmatch(line)
                    if not match:
                        continue
                    candidate = match.group(1).strip()
                    if len(candidate) > self.title_min_length and not is_likely_header(candidate):
                        logger.debug(f"Title from {rule.kind} line on page {page.page_number}: '{candidate}'")
                        return candidate

        logger.debug(f"No title candidate found, falling back to '{DEFAULT_TITLE}'")
        return DEFAULT_TITLE

    def collect_candidates(self, pages: Iterable[PageText]) -> List[HeadingCandidate]:
        """Run every heading pattern over every page and keep the page-sorted raw hits."""
        candidates: List[HeadingCandidate] = []
        # text -> pages it was already accepted on
        seen_pages: Dict[str, List[int]] = defaultdict(list)

        for page in pages:
            for rule in HEADING_PATTERNS:
                for match in rule.regex.finditer(page.text):
                    text = match.group(1).strip()
                    if not (self.candidate_min_length < len(text) < self.candidate_max_length):
                        continue

                    level = determine_heading_level(text)

                    # Running headers and overlapping patterns re-detect the same line
                    if any(abs(p - page.page_number) <= self.duplicate_page_radius for p in seen_pages[text]):
                        continue

                    seen_pages[text].append(page.page_number)
                    candidates.append(HeadingCandidate(level, text, page.page_number))

        # Stable: same-page candidates keep discovery order
        candidates.sort(key=lambda c: c.page)
        logger.debug(f"Collected {len(candidates)} raw heading candidates.")
        return candidates

    def filter_and_clean_headings(self, candidates: Iterable[HeadingCandidate]) -> List[Heading]:
        """Normalize whitespace and drop out-of-range, repeated and boilerplate candidates."""
        filtered: List[Heading] = []
        seen_texts = set()

        for candidate in candidates:
            text = clean_text(candidate.text)

            if len(text) < self.heading_min_length or len(text) > self.heading_max_length:
                continue

            key = text.lower()
            if key in seen_texts:
                continue

            if is_common_false_positive(text):
                continue

            seen_texts.add(key)
            filtered.append(Heading(candidate.level, text, candidate.page))

        return filtered

    def extract_headings(self, pages: Iterable[PageText]) -> List[Heading]:
        candidates = self.collect_candidates(pages)
        headings = self.filter_and_clean_headings(candidates)
        if len(headings) < len(candidates):
            logger.debug(f"Filter pass removed {len(candidates) - len(headings)} candidates.")
        return headings

    def build_outline(self, pages: Sequence[PageText]) -> DocumentOutline:
        title = self.extract_title(pages)
        headings = self.extract_headings(pages)
        return DocumentOutline(title, headings)


# --- PDF Access ---
def read_page_texts(pdf_path: str, max_pages: int = 50) -> List[PageText]:
    """Plain text of the first `max_pages` pages, 1-based."""
    with fitz.open(pdf_path) as doc:
        page_count = min(len(doc), max_pages)
        pages = [PageText(page_num + 1, doc[page_num].get_text("text")) for page_num in range(page_count)]
    logger.debug(f"Read text from {len(pages)} pages of {pdf_path}")
    return pages


# --- Main Extraction Function ---
def extract_outline(pdf_path: str, max_pages: int = config.MAX_PAGES,
                    title_pages: int = config.TITLE_PAGES) -> DocumentOutline:
    """
    Main function to extract the outline from a PDF file.
    Errors from opening or reading the document propagate to the caller.
    """
    logger.info(f"Starting extraction for: {pdf_path}")
    pages = read_page_texts(pdf_path, max_pages)

    extractor = PDFOutlineExtractor(title_page_limit=title_pages)
    outline = extractor.build_outline(pages)

    logger.info(f"Extraction finished for: {pdf_path} ({len(outline.headings)} headings)")
    return outline


if __name__ == '__main__':
    # Dump one document's outline to stdout
    import sys
    import json
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    if len(sys.argv) != 2:
        sys.exit("Usage: python extractor.py <pdf_file>")
    outline = extract_outline(sys.argv[1], max_pages=config.MAX_PAGES, title_pages=config.TITLE_PAGES)
    print(json.dumps(outline.to_dict(), indent=2, ensure_ascii=False))

#!/usr/bin/env python3
"""
Main runner script for PDF outline extraction.
Processes all PDFs in the input directory and writes one JSON file per PDF to the output directory.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import config
from extractor import DocumentOutline, extract_outline

logger = logging.getLogger(__name__)


@dataclass
class DocumentResult:
    """Outcome of processing a single PDF."""
    pdf_path: Path
    output_path: Optional[Path] = None
    outline: Optional[DocumentOutline] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BatchReport:
    results: List[DocumentResult] = field(default_factory=list)

    @property
    def succeeded(self) -> List[DocumentResult]:
        return [r for r in self.results if r.ok]

    @property
    def failed(self) -> List[DocumentResult]:
        return [r for r in self.results if not r.ok]


def find_pdf_files(input_dir: Path) -> List[Path]:
    """PDF files directly inside input_dir, extension matched case-insensitively."""
    return sorted(p for p in input_dir.iterdir() if p.is_file() and p.suffix.lower() == '.pdf')


def write_outline_json(outline: DocumentOutline, output_path: Path):
    """Write the outline as UTF-8 JSON; output_path only ever holds a complete document."""
    payload = json.dumps(outline.to_dict(), ensure_ascii=False, indent=2)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    tmp_path = output_path.with_name(output_path.name + '.tmp')
    try:
        with open(tmp_path, 'w', encoding='utf-8') as f:
            f.write(payload)
        os.replace(tmp_path, output_path)
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise


def process_pdf(pdf_path: Path, output_dir: Path, max_pages: int = config.MAX_PAGES,
                title_pages: int = config.TITLE_PAGES) -> DocumentResult:
    """
    Extract and write the outline of one PDF.
    Any failure is logged and reported in the result; nothing is written for a failed document.
    """
    output_path = output_dir / f"{pdf_path.stem}.json"
    try:
        logger.info(f"Processing: {pdf_path.name}")
        outline = extract_outline(str(pdf_path), max_pages=max_pages, title_pages=title_pages)
        write_outline_json(outline, output_path)
    except Exception as e:
        logger.error(f"Error processing {pdf_path.name}: {e}", exc_info=True)
        return DocumentResult(pdf_path, error=str(e))

    logger.info(f"Completed: {output_path.name}")
    return DocumentResult(pdf_path, output_path=output_path, outline=outline)


def process_directory(input_dir: Path = config.INPUT_DIR, output_dir: Path = config.OUTPUT_DIR,
                      max_pages: int = config.MAX_PAGES, title_pages: int = config.TITLE_PAGES) -> BatchReport:
    """Process every PDF in input_dir one at a time; a failed document never stops the batch."""
    report = BatchReport()
    input_dir, output_dir = Path(input_dir), Path(output_dir)

    # Create output directory if it doesn't exist
    output_dir.mkdir(parents=True, exist_ok=True)

    if not input_dir.is_dir():
        logger.error(f"Input directory not found: {input_dir}")
        return report

    pdf_files = find_pdf_files(input_dir)
    if not pdf_files:
        logger.info(f"No PDF files found in {input_dir}")
        return report

    logger.info(f"Found {len(pdf_files)} PDF files to process")

    for pdf_path in pdf_files:
        report.results.append(process_pdf(pdf_path, output_dir, max_pages=max_pages, title_pages=title_pages))

    logger.info(f"Processing complete! {len(report.succeeded)}/{len(report.results)} files succeeded.")
    for result in report.failed:
        logger.warning(f"Skipped {result.pdf_path.name}: {result.error}")
    return report


def main():
    """Main function to orchestrate PDF processing."""
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    process_directory(config.INPUT_DIR, config.OUTPUT_DIR)


if __name__ == '__main__':
    main()

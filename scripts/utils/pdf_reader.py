#!/usr/bin/env python3
"""
PDF inspection utility.
Uses pdfplumber to check generated CVs: page count, page size and text.
"""

import io
import sys
from pathlib import Path

import pdfplumber

A4_POINTS = (595.0, 842.0)


def _open(source):
    """pdfplumber accepts paths or file-like objects; wrap raw bytes."""
    if isinstance(source, (bytes, bytearray)):
        return pdfplumber.open(io.BytesIO(source))
    return pdfplumber.open(source)


def page_count(source) -> int:
    """Number of pages in a PDF given as a path or raw bytes."""
    with _open(source) as pdf:
        return len(pdf.pages)


def page_sizes(source) -> list:
    """(width, height) in points for each page."""
    with _open(source) as pdf:
        return [(float(page.width), float(page.height)) for page in pdf.pages]


def is_a4(size: tuple, tolerance: float = 2.0) -> bool:
    width, height = size
    return abs(width - A4_POINTS[0]) <= tolerance and abs(height - A4_POINTS[1]) <= tolerance


def extract_text(source) -> str:
    """Extract text from all pages, separated by blank lines."""
    text_parts = []
    with _open(source) as pdf:
        for page in pdf.pages:
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)

    return "\n\n".join(text_parts)


def main():
    import argparse

    parser = argparse.ArgumentParser(description="Inspect a generated CV PDF")
    parser.add_argument("pdf", help="Path to PDF file")
    parser.add_argument("--text", action="store_true", help="Print extracted text")
    args = parser.parse_args()

    pdf_path = Path(args.pdf)
    if not pdf_path.exists():
        print(f"Error: File not found: {pdf_path}", file=sys.stderr)
        sys.exit(1)

    sizes = page_sizes(pdf_path)
    print(f"Pages: {len(sizes)}")
    for i, size in enumerate(sizes, 1):
        label = "A4" if is_a4(size) else f"{size[0]:.0f}x{size[1]:.0f}pt"
        print(f"  Page {i}: {label}")

    if args.text:
        print()
        print(extract_text(pdf_path))


if __name__ == "__main__":
    main()

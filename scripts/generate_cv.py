#!/usr/bin/env python3
"""
Generate a candidate CV PDF from the command line.
Uses the same renderer and Chromium producer as the web service.
"""

import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from web.config import get_renderer_config, get_upload_limits
from web.models import CandidateImages, CandidateRecord, ImageAsset
from web.services.cv_service import CvService, build_filename
from web.services.layouts import LAYOUTS
from web.services.uploads import accept_image

MIME_BY_SUFFIX = {".jpg": "image/jpeg", ".jpeg": "image/jpeg", ".png": "image/png"}


def load_image(path: Optional[str]) -> ImageAsset:
    """Read an image file, applying the same type/size rules as uploads."""
    if not path:
        return ImageAsset.placeholder()
    image_path = Path(path)
    limits = get_upload_limits()
    asset = accept_image(
        image_path.read_bytes(),
        MIME_BY_SUFFIX.get(image_path.suffix.lower()),
        max_size=limits["max_size"],
        allowed_types=limits["allowed_types"],
    )
    if asset is None:
        print(f"  Warning: {image_path.name} rejected, using placeholder")
        return ImageAsset.placeholder()
    return asset


def generate_cv(
    data_path: str,
    output_dir: str = ".",
    profile: Optional[str] = None,
    full_photo: Optional[str] = None,
    passport: Optional[str] = None,
    layout: Optional[str] = None,
    html_only: bool = False,
) -> Path:
    """
    Render a CV from a JSON file.

    Args:
        data_path: JSON file with the candidate record
        output_dir: Directory to write the PDF (or HTML) into
        profile: Optional profile photo path
        full_photo: Optional full-body photo path
        passport: Optional passport scan path
        layout: Layout name (defaults to the configured one)
        html_only: Write the intermediate HTML instead of printing a PDF

    Returns:
        Path of the written file
    """
    with open(data_path, "r", encoding="utf-8") as f:
        record = CandidateRecord.from_dict(json.load(f))

    images = CandidateImages(
        profile=load_image(profile),
        full_photo=load_image(full_photo),
        passport=load_image(passport),
    )

    service = CvService.from_settings(layout=layout)

    out_dir = Path(output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    if html_only:
        out_path = out_dir / build_filename(record).replace(".pdf", ".html")
        out_path.write_text(service.render_html(record, images), encoding="utf-8")
    else:
        document = asyncio.run(service.generate(record, images))
        out_path = out_dir / document.filename
        out_path.write_bytes(document.pdf_bytes)

    print(f"Saved {out_path}")
    return out_path


def main():
    import argparse

    parser = argparse.ArgumentParser(description="Generate a candidate CV PDF")
    parser.add_argument("--data", required=True, help="Candidate JSON file")
    parser.add_argument("--profile", help="Profile photo (JPEG/PNG)")
    parser.add_argument("--full-photo", help="Full-body photo (JPEG/PNG)")
    parser.add_argument("--passport", help="Passport scan (JPEG/PNG)")
    parser.add_argument("--output", default=".", help="Output directory (default: .)")
    parser.add_argument("--layout", choices=sorted(LAYOUTS),
                       help=f"Layout (default: {get_renderer_config()['layout']})")
    parser.add_argument("--html", action="store_true", help="Write HTML instead of PDF")
    parser.add_argument("--verify", action="store_true", help="Print page count of the generated PDF")
    args = parser.parse_args()

    try:
        out_path = generate_cv(
            data_path=args.data,
            output_dir=args.output,
            profile=args.profile,
            full_photo=args.full_photo,
            passport=args.passport,
            layout=args.layout,
            html_only=args.html,
        )
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.verify and not args.html:
        from scripts.utils.pdf_reader import page_count
        print(f"  Pages: {page_count(out_path)}")


if __name__ == "__main__":
    main()

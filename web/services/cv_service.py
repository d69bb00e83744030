"""
CV generation pipeline: record -> HTML -> PDF.
"""

import logging
import re
from pathlib import Path
from typing import Optional

from web.config import get_logo_path, get_organization_config, get_renderer_config
from web.models import CandidateImages, CandidateRecord, ImageAsset, RenderedDocument
from web.services.cv_renderer import CvRenderer
from web.services.layouts import Organization, get_layout
from web.services.pdf_producer import PdfProducer, RendererOptions

logger = logging.getLogger(__name__)


def build_filename(record: CandidateRecord) -> str:
    """CV_<name>_<passport>.pdf, with whitespace runs in the name replaced by '_'."""
    name = re.sub(r"\s+", "_", record.full_name.strip()) or "candidate"
    parts = ["CV", name]
    if record.passport_number:
        parts.append(re.sub(r"\s+", "", record.passport_number))
    return "_".join(parts) + ".pdf"


LOGO_MIME_TYPES = {".svg": "image/svg+xml", ".jpg": "image/jpeg", ".jpeg": "image/jpeg"}


def load_logo(path: Path) -> ImageAsset:
    """Read the organization logo once; PNG unless the suffix says otherwise."""
    mime = LOGO_MIME_TYPES.get(path.suffix.lower(), "image/png")
    with open(path, "rb") as f:
        data = f.read()
    logger.info(f"Loaded logo from {path} ({len(data)} bytes)")
    return ImageAsset(data=data, mime_type=mime)


class CvService:
    """
    Core service for the CV pipeline.

    Responsibilities:
    1. Render the candidate record to the two-page HTML document
    2. Delegate printing to the PdfProducer
    3. Return a RenderedDocument with the download filename
    """

    def __init__(self, renderer: CvRenderer, producer: PdfProducer, logo: ImageAsset):
        self.renderer = renderer
        self.producer = producer
        self.logo = logo

    @classmethod
    def from_settings(
        cls,
        logo: Optional[ImageAsset] = None,
        layout: Optional[str] = None,
    ) -> "CvService":
        """
        Build the service from settings.yaml.

        `layout` overrides the configured layout name. Fails fast on an
        unknown layout or missing logo.
        """
        layout_config = get_layout(layout or get_renderer_config()["layout"])
        organization = Organization.from_config(get_organization_config())
        renderer = CvRenderer(layout=layout_config, organization=organization)
        producer = PdfProducer(RendererOptions.from_settings())
        return cls(renderer, producer, logo or load_logo(get_logo_path()))

    def render_html(self, record: CandidateRecord, images: Optional[CandidateImages] = None) -> str:
        return self.renderer.render(record, self.logo, images or CandidateImages())

    async def generate(
        self,
        record: CandidateRecord,
        images: Optional[CandidateImages] = None,
    ) -> RenderedDocument:
        """
        Produce the CV PDF for one candidate.

        Raises:
            PdfGenerationError: If printing fails
        """
        html = self.render_html(record, images)
        pdf_bytes = await self.producer.produce(html)
        document = RenderedDocument(pdf_bytes=pdf_bytes, filename=build_filename(record))
        logger.info(f"Generated CV: {document.filename} ({len(document)} bytes)")
        return document

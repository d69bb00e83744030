"""
Prints an HTML document to PDF with headless Chromium (Playwright).

Each call launches its own browser and closes it before returning, whether
or not printing succeeded. Nothing is pooled or shared between requests.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from playwright.async_api import async_playwright

from web.config import get_renderer_config
from web.errors import PdfGenerationError

logger = logging.getLogger(__name__)

DEFAULT_CHROMIUM_ARGS = (
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--font-render-hinting=none",
)

ZERO_MARGIN = {"top": "0", "right": "0", "bottom": "0", "left": "0"}


@dataclass(frozen=True)
class RendererOptions:
    page_format: str = "A4"
    # 0 means wait indefinitely
    timeout_ms: int = 0
    chromium_args: tuple = field(default=DEFAULT_CHROMIUM_ARGS)

    @classmethod
    def from_settings(cls) -> "RendererOptions":
        config = get_renderer_config()
        return cls(
            timeout_ms=config["timeout_ms"],
            chromium_args=tuple(config["chromium_args"]) or DEFAULT_CHROMIUM_ARGS,
        )


class PdfProducer:
    """
    Converts a complete HTML document into PDF bytes.

    Usage:
        producer = PdfProducer(RendererOptions.from_settings())
        pdf_bytes = await producer.produce(html)
    """

    def __init__(self, options: Optional[RendererOptions] = None, playwright_factory=async_playwright):
        self.options = options or RendererOptions()
        self._playwright_factory = playwright_factory

    async def produce(self, html: str) -> bytes:
        """
        Load `html` into a fresh page, wait for network idle and print it.

        Raises:
            PdfGenerationError: If the browser fails to launch, load or print
        """
        try:
            async with self._playwright_factory() as p:
                browser = await p.chromium.launch(
                    headless=True,
                    args=list(self.options.chromium_args),
                )
                try:
                    page = await browser.new_page()
                    await page.set_content(
                        html,
                        wait_until="networkidle",
                        timeout=self.options.timeout_ms,
                    )
                    pdf_bytes = await page.pdf(
                        format=self.options.page_format,
                        print_background=True,
                        margin=ZERO_MARGIN,
                    )
                finally:
                    await browser.close()
        except Exception as e:
            logger.error(f"Chromium failed to produce PDF: {e}", exc_info=True)
            raise PdfGenerationError(str(e)) from e

        logger.info(f"Produced PDF: {len(pdf_bytes)} bytes")
        return pdf_bytes

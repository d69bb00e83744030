"""
Exceptions raised by the CV generation pipeline.
"""


class CvGenerationError(Exception):
    """Base class for anything that stops a CV from being produced."""


class InvalidPayloadError(CvGenerationError):
    """The `data` form field is not valid JSON."""


class PdfGenerationError(CvGenerationError):
    """The headless browser failed to launch, load or print the document."""

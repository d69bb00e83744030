"""
CV generation routes.
"""

import logging
from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import JSONResponse, Response

from web.models import CandidateRecord, RenderedDocument
from web.services.cv_service import CvService
from web.services.uploads import read_candidate_images

logger = logging.getLogger(__name__)

router = APIRouter()


def get_cv_service(request: Request) -> CvService:
    """Dependency returning the process-wide CvService built at startup."""
    return request.app.state.cv_service


def content_disposition(filename: str) -> str:
    """Attachment header; non-ASCII names go in RFC 5987 filename*."""
    quoted = quote(filename)
    if quoted != filename:
        return f"attachment; filename*=utf-8''{quoted}"
    return f'attachment; filename="{filename}"'


def pdf_response(document: RenderedDocument) -> Response:
    return Response(
        content=document.pdf_bytes,
        media_type=document.content_type,
        headers={"Content-Disposition": content_disposition(document.filename)},
    )


@router.post("/generate-cv")
async def generate_cv(
    data: str = Form("{}"),
    profile_photo: Optional[UploadFile] = File(None, alias="profilePhoto"),
    full_photo: Optional[UploadFile] = File(None, alias="fullPhoto"),
    passport_scan: Optional[UploadFile] = File(None, alias="passportScan"),
    service: CvService = Depends(get_cv_service),
):
    """Render the candidate CV and return it as a PDF download."""
    try:
        record = CandidateRecord.from_json(data)
        images = await read_candidate_images(profile_photo, full_photo, passport_scan)
        document = await service.generate(record, images)
    except Exception as e:
        logger.error(f"PDF generation error: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to generate PDF", "details": str(e)},
        )

    return pdf_response(document)

"""
Haneen Al Sharq CV Generator
Turns candidate biodata and photos into a two-page bilingual PDF CV.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from web.config import get_cors_origins, get_host, get_log_level, get_port, get_service_info
from web.routers import cv
from web.services.cv_service import CvService

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

service_info = get_service_info()

app = FastAPI(
    title=service_info["service"],
    description="Generates bilingual Arabic/English candidate CVs as PDF",
    version=service_info["version"],
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)

# Logo and layout are loaded once and shared by every request
app.state.cv_service = CvService.from_settings()

app.include_router(cv.router, prefix="/api", tags=["cv"])


@app.get("/")
@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok", **service_info}


if __name__ == "__main__":
    port = get_port()
    logger.info(f"CV generator listening on port {port}")
    uvicorn.run("web.app:app", host=get_host(), port=port)

"""
HTTP tests for the CV endpoint and health check (web/app.py, web/routers/cv.py).
The PDF producer is faked; see test_pdf_producer.py for Chromium.
"""
import json
import re

import pytest
from factories import FAKE_PDF, FakeProducer, RED_PNG, make_payload

from web.errors import PdfGenerationError
from web.models import ImageAsset
from web.routers.cv import content_disposition

PLACEHOLDER_URI = ImageAsset.placeholder().data_uri


def img_src(html: str, css_class: str) -> str:
    return re.search(rf'<img src="([^"]+)" class="{css_class}"', html).group(1)


class TestHealth:
    @pytest.mark.parametrize("path", ["/", "/health"])
    def test_status(self, client, path):
        response = client.get(path)
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["version"] == "1.0.0"
        assert body["service"] == "Haneen Al Sharq CV Generator"


class TestGenerateCv:
    def test_end_to_end_minimal(self, client, fake_producer):
        data = json.dumps({"fullName": "Ahmed Ali", "passportNumber": "P1234567"})
        response = client.post("/api/generate-cv", data={"data": data})

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        disposition = response.headers["content-disposition"]
        assert "Ahmed_Ali" in disposition
        assert "P1234567" in disposition
        assert response.content == FAKE_PDF
        assert fake_producer.last_html.count('<section class="page"') == 2

    def test_no_data_field(self, client, fake_producer):
        response = client.post("/api/generate-cv", data={})
        assert response.status_code == 200
        assert 'filename="CV_candidate.pdf"' in response.headers["content-disposition"]

    def test_full_payload_with_images(self, client, fake_producer):
        response = client.post(
            "/api/generate-cv",
            data={"data": json.dumps(make_payload())},
            files={
                "profilePhoto": ("face.png", RED_PNG, "image/png"),
                "fullPhoto": ("body.jpg", b"\xff\xd8\xffjpeg", "image/jpeg"),
                "passportScan": ("passport.png", RED_PNG, "image/png"),
            },
        )
        assert response.status_code == 200
        html = fake_producer.last_html
        assert img_src(html, "profile-photo") == ImageAsset(RED_PNG, "image/png").data_uri
        assert img_src(html, "full-photo") == ImageAsset(b"\xff\xd8\xffjpeg", "image/jpeg").data_uri
        assert img_src(html, "passport-scan") == ImageAsset(RED_PNG, "image/png").data_uri

    def test_non_image_upload_replaced_by_placeholder(self, client, fake_producer):
        response = client.post(
            "/api/generate-cv",
            data={"data": "{}"},
            files={"passportScan": ("passport.pdf", b"%PDF-1.4 scan", "application/pdf")},
        )
        assert response.status_code == 200
        assert img_src(fake_producer.last_html, "passport-scan") == PLACEHOLDER_URI

    def test_oversized_upload_replaced_by_placeholder(self, client, fake_producer, monkeypatch):
        monkeypatch.setattr(
            "web.services.uploads.get_upload_limits",
            lambda: {"max_size": 16, "allowed_types": ("image/png", "image/jpeg")},
        )
        response = client.post(
            "/api/generate-cv",
            data={"data": "{}"},
            files={
                "profilePhoto": ("big.png", b"x" * 17, "image/png"),
                "fullPhoto": ("small.png", b"x" * 16, "image/png"),
            },
        )
        assert response.status_code == 200
        html = fake_producer.last_html
        assert img_src(html, "profile-photo") == PLACEHOLDER_URI
        assert img_src(html, "full-photo") == ImageAsset(b"x" * 16, "image/png").data_uri

    def test_arabic_name_filename_encoded(self, client):
        data = json.dumps({"fullName": "أحمد علي", "passportNumber": "P1"})
        response = client.post("/api/generate-cv", data={"data": data})
        assert response.status_code == 200
        assert response.headers["content-disposition"].startswith("attachment; filename*=utf-8''CV_")


class TestErrors:
    def test_malformed_json(self, client, fake_producer):
        response = client.post("/api/generate-cv", data={"data": "{not json"})
        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "Failed to generate PDF"
        assert "Invalid JSON" in body["details"]
        assert fake_producer.calls == []

    def test_renderer_failure(self, client, cv_service):
        cv_service.producer = FakeProducer(error=PdfGenerationError("Target page, context or browser has been closed"))
        response = client.post("/api/generate-cv", data={"data": "{}"})
        assert response.status_code == 500
        assert response.json() == {
            "error": "Failed to generate PDF",
            "details": "Target page, context or browser has been closed",
        }
        assert response.headers["content-type"].startswith("application/json")


class TestContentDisposition:
    def test_ascii(self):
        assert content_disposition("CV_A_B.pdf") == 'attachment; filename="CV_A_B.pdf"'

    def test_non_ascii(self):
        assert content_disposition("CV_علي.pdf").startswith("attachment; filename*=utf-8''CV_%D8")

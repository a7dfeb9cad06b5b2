"""Tests for POST /api/extract endpoint."""

import io
from unittest.mock import MagicMock, patch

from closing_agent.deps import get_extractor
from closing_agent.main import app
from closing_agent.schemas.domain import ExtractedFacts


class TestExtractEndpoint:
    """Tests for POST /api/extract."""

    def test_pdf_returns_sample_facts(self, client):
        files = {"file": ("offer.pdf", io.BytesIO(b"%PDF-1.4 fake pdf content"), "application/pdf")}
        response = client.post("/api/extract", files=files)

        assert response.status_code == 200
        data = response.json()
        assert data["filename"] == "offer.pdf"
        assert data["message"] == "Contract data extracted successfully"
        assert data["extracted"]["propertyAddress"] == "1560 S 26th ST, Milwaukee, WI 53204"
        assert data["extracted"]["acceptanceDate"] == "2025-09-09"

    def test_text_file_extracts_address_only(self, client):
        """Plain text yields only an address; other fields come back null."""
        files = {"file": ("offer.txt", io.BytesIO(b"12 Elm St\nmore"), "text/plain")}
        data = client.post("/api/extract", files=files).json()

        assert data["extracted"]["propertyAddress"] == "12 Elm St"
        assert data["extracted"]["buyerName"] is None

    def test_nothing_extracted(self, client):
        """An upload with no usable content is a 200 with a null payload."""
        files = {"file": ("blank.txt", io.BytesIO(b"   \n"), "text/plain")}
        response = client.post("/api/extract", files=files)

        assert response.status_code == 200
        assert response.json()["extracted"] is None
        assert response.json()["message"] == "No data extracted"

    def test_empty_file_returns_400(self, client):
        files = {"file": ("offer.pdf", io.BytesIO(b""), "application/pdf")}
        response = client.post("/api/extract", files=files)

        assert response.status_code == 400
        assert "empty upload" in response.json()["detail"]

    def test_oversize_file_returns_413(self, client):
        """Size limit comes from settings and is enforced before extraction."""
        with patch("closing_agent.routes.documents.settings") as mock_settings:
            mock_settings.MAX_FILE_SIZE_MB = 1  # 1 MB limit

            large_content = b"X" * (2 * 1024 * 1024)  # 2 MB
            files = {"file": ("large.pdf", io.BytesIO(large_content), "application/pdf")}
            response = client.post("/api/extract", files=files)

        assert response.status_code == 413
        assert "exceeds" in response.json()["detail"]

    def test_uses_injected_extractor(self, client):
        """The route delegates to whatever extractor the dependency provides."""
        mock_extractor = MagicMock()
        mock_extractor.extract.return_value = ExtractedFacts(buyer_name="Jane Doe")
        app.dependency_overrides[get_extractor] = lambda: mock_extractor

        try:
            files = {"file": ("offer.pdf", io.BytesIO(b"%PDF-1.4"), "application/pdf")}
            response = client.post("/api/extract", files=files)

            assert response.status_code == 200
            assert response.json()["extracted"]["buyerName"] == "Jane Doe"
            call = mock_extractor.extract.call_args
            assert call.kwargs["filename"] == "offer.pdf"
            assert call.kwargs["content_type"] == "application/pdf"
        finally:
            app.dependency_overrides.clear()

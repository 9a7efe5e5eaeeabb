import asyncio
import json

import httpx
import pytest
from unittest.mock import patch

from src.analysis import (
    AnalysisBackendError,
    AnalysisClient,
    InvalidAnalysisResponseError,
)


def _patched_transport(handler):
    """Route the client's AsyncClient through an in-process mock transport."""
    real_client = httpx.AsyncClient
    transport = httpx.MockTransport(handler)
    return patch(
        "src.analysis.client.httpx.AsyncClient",
        side_effect=lambda **kwargs: real_client(transport=transport, **kwargs),
    )


class TestAnalysisClient:

    def test_analyze_image(self, backend_payload):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["headers"] = request.headers
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=backend_payload)

        client = AnalysisClient(base_url="http://backend:3000/", request_id="req-1")
        with _patched_transport(handler):
            result = asyncio.run(client.analyze_image("aGVsbG8="))

        assert seen["url"] == "http://backend:3000/analyze"
        assert seen["headers"]["X-Request-ID"] == "req-1"
        assert seen["body"] == {
            "image": "aGVsbG8=",
            "isOfflineAnalysis": False,
            "isCroppedImage": True,
        }
        assert result.is_vegan is True
        assert result.all_ingredients[2] == "färgämne (E120)"
        assert result.detected_language == "sv"

    def test_error_status_uses_backend_message(self):
        def handler(request):
            return httpx.Response(500, json={"message": "Vision API error"})

        client = AnalysisClient(base_url="http://backend:3000")
        with _patched_transport(handler):
            with pytest.raises(AnalysisBackendError) as exc_info:
                asyncio.run(client.analyze_image("aGVsbG8="))

        assert exc_info.value.status_code == 500
        assert str(exc_info.value) == "Vision API error"

    def test_error_status_without_body(self):
        def handler(request):
            return httpx.Response(503, text="unavailable")

        client = AnalysisClient(base_url="http://backend:3000")
        with _patched_transport(handler):
            with pytest.raises(AnalysisBackendError) as exc_info:
                asyncio.run(client.analyze_image("aGVsbG8="))

        assert str(exc_info.value) == "Analysis failed"

    def test_missing_fields_are_rejected(self):
        def handler(request):
            return httpx.Response(200, json={"success": True, "confidence": 0.5})

        client = AnalysisClient(base_url="http://backend:3000")
        with _patched_transport(handler):
            with pytest.raises(InvalidAnalysisResponseError):
                asyncio.run(client.analyze_image("aGVsbG8="))

    def test_unreachable_backend(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = AnalysisClient(base_url="http://backend:3000")
        with _patched_transport(handler):
            with pytest.raises(AnalysisBackendError) as exc_info:
                asyncio.run(client.analyze_image("aGVsbG8="))

        assert exc_info.value.status_code is None

    def test_health_check(self):
        def handler(request):
            assert request.url.path == "/health"
            return httpx.Response(200, json={"status": "ok"})

        client = AnalysisClient(base_url="http://backend:3000")
        with _patched_transport(handler):
            assert asyncio.run(client.health_check()) is True

    def test_request_id_is_generated(self):
        client = AnalysisClient(base_url="http://backend:3000")
        assert len(client.request_id) == 36

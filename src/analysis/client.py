import httpx
import logging
import uuid

from langsmith import traceable
from pydantic import ValidationError

from configs import get_settings
from .models import ImageAnalysisResponse

logger = logging.getLogger(__name__)


class AnalysisServiceError(Exception):
    """Base error for the vision analysis backend boundary."""


class AnalysisBackendError(AnalysisServiceError):
    """Backend unreachable or answered with an error status."""

    def __init__(self, message: str, status_code: int = None):
        self.status_code = status_code
        super().__init__(message)


class InvalidAnalysisResponseError(AnalysisServiceError):
    """Backend answered 2xx with a body we cannot use."""


class AnalysisClient:
    """
    HTTP client for the vision analysis backend.

    Sends a cropped ingredient-list image and returns the parsed verdict.
    """

    def __init__(
        self,
        base_url: str = None,
        timeout: float = None,
        request_id: str = None
    ):
        """
        Initialize analysis client.

        Parameters
        ----------
        base_url : str, optional
            Backend URL, defaults to settings
        timeout : float, optional
            Request timeout in seconds, defaults to settings
        request_id : str, optional
            Request ID for tracing, auto-generated if not provided
        """
        settings = get_settings()
        self._base_url = (base_url or settings.analysis_backend_url).rstrip("/")
        self._timeout = httpx.Timeout(timeout or settings.analysis_timeout, connect=10.0)
        self._request_id = request_id or str(uuid.uuid4())

    @property
    def request_id(self) -> str:
        """Get current request ID."""
        return self._request_id

    @traceable(name="analysis_backend_analyze")
    async def analyze_image(self, image_base64: str) -> ImageAnalysisResponse:
        """
        Ask the backend to analyze an ingredient-list image.

        Parameters
        ----------
        image_base64 : str
            Base64 encoded image, without a data-URI prefix

        Returns
        -------
        ImageAnalysisResponse
            Parsed and validated backend verdict
        """
        logger.info(
            f"[{self._request_id}] Calling analysis backend",
            extra={"request_id": self._request_id}
        )

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(
                    f"{self._base_url}/analyze",
                    json={
                        "image": image_base64,
                        "isOfflineAnalysis": False,
                        "isCroppedImage": True
                    },
                    headers={"X-Request-ID": self._request_id}
                )
        except httpx.HTTPError as e:
            logger.error(f"[{self._request_id}] Analysis backend unreachable: {e}")
            raise AnalysisBackendError(f"Analysis backend unreachable: {e}") from e

        if response.status_code >= 400:
            message = _error_message(response)
            logger.error(
                f"[{self._request_id}] Analysis backend returned {response.status_code}: {message}"
            )
            raise AnalysisBackendError(message, status_code=response.status_code)

        try:
            result = ImageAnalysisResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"[{self._request_id}] Invalid response format from analysis backend: {e}")
            raise InvalidAnalysisResponseError("Invalid response format from analysis backend") from e

        logger.info(
            f"[{self._request_id}] Backend verdict: vegan={result.is_vegan} "
            f"confidence={result.confidence:.2f} ingredients={len(result.all_ingredients)}",
            extra={"request_id": self._request_id}
        )
        return result

    async def health_check(self) -> bool:
        """
        Check if the analysis backend is healthy.

        Returns
        -------
        bool
            True if backend is healthy
        """
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(f"{self._base_url}/health")
                return response.status_code == 200
        except httpx.HTTPError as e:
            logger.error(f"Analysis backend health check failed: {e}")
            return False


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return "Analysis failed"
    if isinstance(body, dict):
        return body.get("message") or body.get("error") or "Analysis failed"
    return "Analysis failed"

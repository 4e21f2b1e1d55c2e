"""HTTP client for the external wage prediction service (POST /predict)."""

from numbers import Real
from typing import Any, Dict, Optional

import httpx

from config import HTTP_TIMEOUT_SECONDS, PREDICTION_API_URL, REQUIRED_FIELDS
from schemas.prediction import PredictionResponse
from schemas.wage_profile import WageProfile
from utils.helpers import format_wage
from utils.logger import get_logger

logger = get_logger(__name__)

SERVICE_UNAVAILABLE_MESSAGE = (
    "Sorry, the wage prediction service is currently unavailable. Please try again later."
)


def build_payload(profile: WageProfile) -> Dict[str, Optional[str]]:
    """Request body: the six profile fields as strings."""
    return {f: getattr(profile, f) for f in REQUIRED_FIELDS}


def normalize_wage(value: Any) -> Optional[float]:
    """Accept a number or a one-element array of numbers; None otherwise."""
    if isinstance(value, list):
        if len(value) != 1:
            return None
        value = value[0]
    if isinstance(value, bool):
        return None
    if isinstance(value, Real):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def _error(diagnostics: Dict[str, Any]) -> PredictionResponse:
    return PredictionResponse(status="error", message=SERVICE_UNAVAILABLE_MESSAGE, diagnostics=diagnostics)


class PredictionClient:
    """
    One awaited call per turn to the prediction endpoint. No retry: a
    failed call is reported as an error outcome immediately.
    """

    def __init__(
        self,
        url: str = PREDICTION_API_URL,
        timeout: float = HTTP_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._transport = transport

    async def _post(self, payload: Dict[str, Any]) -> httpx.Response:
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            return await client.post(self._url, json=payload)

    async def predict(self, profile: WageProfile) -> PredictionResponse:
        payload = build_payload(profile)
        try:
            response = await self._post(payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Prediction API HTTP error: %s %s", e.response.status_code, e.response.text[:500]
            )
            return _error({"status_code": e.response.status_code, "body": e.response.text})
        except httpx.HTTPError as e:
            logger.error("Prediction API request failed: %s: %s", type(e).__name__, e)
            return _error({"error": f"{type(e).__name__}: {e}"})
        except Exception as e:
            logger.exception("Unexpected error calling prediction API %s", self._url)
            return _error({"error": f"{type(e).__name__}: {e}"})

        try:
            data = response.json()
        except ValueError as e:
            logger.error("Prediction API returned non-JSON body: %s", e)
            return _error({"status_code": response.status_code, "body": response.text, "error": str(e)})

        wage = normalize_wage(data.get("predictedWage") if isinstance(data, dict) else None)
        if wage is None:
            logger.error("Prediction API response has no usable predictedWage: %s", str(data)[:500])
            return _error({"status_code": response.status_code, "body": response.text})

        logger.info("Prediction API returned wage=%.2f for country=%s", wage, profile.country)
        return PredictionResponse(
            status="success",
            predicted_wage=wage,
            message=f"Your predicted wage is {format_wage(wage)} per year.",
            diagnostics={"status_code": response.status_code},
        )

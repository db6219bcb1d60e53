"""Remote procedure client delegating cost prediction to the hosted database"""

import math
import httpx
from typing import Any, Dict
from abroad_budget.domain.models import PredictionRequest
from abroad_budget.domain.prediction import round_half_up
from abroad_budget.domain.exceptions import RemotePredictionError
from abroad_budget.config import settings

RPC_NAME = "calculate_predicted_cost"


def build_rpc_params(request: PredictionRequest) -> Dict[str, Any]:
    """Map a request onto the procedure's p_* arguments (the procedure takes no university)"""
    return {
        "p_city_id": request.city_id,
        "p_duration_months": request.duration_months,
        "p_accommodation_level": request.accommodation_level,
        "p_dining_level": request.dining_level,
        "p_nightlife_level": request.nightlife_level,
        "p_activities_level": request.activities_level,
        "p_shopping_level": request.shopping_level,
        "p_local_trips": request.local_trips,
        "p_international_trips": request.international_trips,
    }


class RemotePredictorClient:
    """Client for the calculate_predicted_cost remote procedure"""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or settings.supabase_url).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.supabase_anon_key
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def predict_cost(self, request: PredictionRequest) -> int:
        """
        Ask the remote procedure for an estimate.

        A null result is treated as 0.

        Raises:
            RemotePredictionError: On timeout, HTTP errors, or non-numeric response
        """
        headers = {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
        }
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.post(
                    f"{self.base_url}/rest/v1/rpc/{RPC_NAME}",
                    json=build_rpc_params(request),
                    headers=headers,
                )
                response.raise_for_status()
                data = response.json()

                if not data:
                    return 0
                if isinstance(data, bool) or not isinstance(data, (int, float, str)):
                    raise TypeError(f"unexpected result {data!r}")
                value = float(data)
                if not math.isfinite(value):
                    raise ValueError(f"non-finite result {data!r}")
                return round_half_up(value)

            except httpx.TimeoutException as e:
                raise RemotePredictionError(f"Remote procedure timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise RemotePredictionError(f"Remote procedure error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise RemotePredictionError(f"Remote procedure unreachable: {e}") from e
            except (ValueError, TypeError) as e:
                raise RemotePredictionError(f"Invalid result from remote procedure: {e}") from e

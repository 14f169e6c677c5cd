"""
HTTP client for LUIS-compatible NLU endpoints.
"""
import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from ..config import ActionBindingConfig
from ..exceptions import ConfigurationError, InvalidArgumentError, NLUServiceError
from ..models import NLUResult
from .service import NLUService

logger = logging.getLogger(__name__)


class LuisHttpService(NLUService):
    """
    NLUService backed by a LUIS v2 prediction endpoint.

    Usage:
        async with LuisHttpService(endpoint, app_id, key) as service:
            result = await service.query("book a flight to Paris")
    """

    def __init__(
        self,
        endpoint: str,
        app_id: str,
        subscription_key: str,
        timeout: float = 10.0,
        staging: bool = False,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize LUIS client.
        
        :param endpoint: Base URL, e.g. https://westus.api.cognitive.microsoft.com
        :param app_id: LUIS application id
        :param subscription_key: Subscription key sent with every query
        :param timeout: Request timeout in seconds
        :param staging: Query the staging slot instead of production
        :param client: Optional shared httpx.AsyncClient
        """
        if not endpoint or not app_id or not subscription_key:
            raise InvalidArgumentError("endpoint, app_id and subscription_key are required")

        self._url = f"{endpoint.rstrip('/')}/luis/v2.0/apps/{app_id}"
        self._subscription_key = subscription_key
        self._staging = staging
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_config(cls, config: ActionBindingConfig) -> "LuisHttpService":
        if not (config.nlu_endpoint and config.nlu_app_id and config.nlu_subscription_key):
            raise ConfigurationError(
                "NLU_ENDPOINT, NLU_APP_ID and NLU_SUBSCRIPTION_KEY must all be set"
            )
        return cls(
            endpoint=config.nlu_endpoint,
            app_id=config.nlu_app_id,
            subscription_key=config.nlu_subscription_key,
            timeout=config.nlu_timeout_seconds,
            staging=config.nlu_staging,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_value, traceback):
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def query(self, text: str) -> NLUResult:
        if text is None or not str(text).strip():
            raise InvalidArgumentError("text is required")

        params = {
            "q": text,
            "subscription-key": self._subscription_key,
            "verbose": "true",
        }
        if self._staging:
            params["staging"] = "true"

        try:
            response = await self._client.get(self._url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(f"NLU query failed with status {e.response.status_code}")
            raise NLUServiceError(
                f"NLU service returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.warning(f"NLU query failed: {e}")
            raise NLUServiceError(f"NLU service unreachable: {e}") from e

        try:
            return NLUResult.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise NLUServiceError(f"Unexpected NLU response: {e}") from e

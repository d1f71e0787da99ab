"""
HTTP gateway adapter - Implements RegistrationGateway protocol.

Posts the registration form to POST /api/auth/register with httpx and
maps the JSON envelope onto a SubmitResult. Any response the server
produced, including 400/409/500, is a SubmitResult; only failures to
get a usable response raise GatewayUnavailable.
"""

import logging
from types import TracebackType

import httpx

from src.domain.exceptions import GatewayUnavailable
from src.domain.ports import SubmitResult
from src.domain.validation import FieldError, FormData

logger = logging.getLogger(__name__)

REGISTER_PATH = "/api/auth/register"


class HttpRegistrationGateway:
    """
    Implements RegistrationGateway protocol via httpx.AsyncClient.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Closes the client on aclose() only if it created it.
    """

    def __init__(
        self,
        base_url: str,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        """
        Args:
            base_url: API root, e.g. http://localhost:3001
            client: Pre-configured client (tests pass one with a mock transport)
            timeout: Request timeout in seconds for a client created here
        """
        self._base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def register(self, form_data: FormData) -> SubmitResult:
        """
        Submit the form.

        Raises:
            GatewayUnavailable: On transport errors or a non-JSON response
        """
        url = f"{self._base_url}{REGISTER_PATH}"
        try:
            response = await self._client.post(url, json=form_data.to_payload())
        except httpx.HTTPError as e:
            raise GatewayUnavailable(f"POST {url} failed: {e}") from e

        try:
            body = response.json()
        except ValueError as e:
            raise GatewayUnavailable(
                f"POST {url} returned non-JSON response ({response.status_code})"
            ) from e

        if not isinstance(body, dict):
            raise GatewayUnavailable(f"POST {url} returned unexpected body")

        accepted = response.status_code == 201 and bool(body.get("success"))
        logger.info("POST %s -> %s", url, response.status_code)
        return SubmitResult(
            accepted=accepted,
            message=str(body.get("message") or ""),
            errors=[
                FieldError(field=item["field"], message=item["message"])
                for item in body.get("errors") or []
                if isinstance(item, dict) and "field" in item and "message" in item
            ],
            user=body.get("data") if accepted else None,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpRegistrationGateway":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

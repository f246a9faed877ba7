"""Transport to the remote vote aggregator.

The aggregator is the HTTP API's ``/threads`` resource. Responses are mapped
onto the client error taxonomy so the controller can decide whether to retry,
adopt the server's tally, or revert.
"""

from abc import ABC, abstractmethod
from typing import Any

import httpx
import logfire
from pydantic import ValidationError as PydanticValidationError

from alumni.config import VoteClientSettings
from alumni.domain.value import VoteChoice, VoteTally

from .error import ConflictError, NetworkError, ValidationError, VoteClientError
from .model import ThreadSeed

ALUMNI_ID_HEADER = "X-Alumni-Id"


class VoteAggregator(ABC):
    """Remote collaborator that owns the authoritative vote."""

    @abstractmethod
    async def submit_vote(
        self,
        thread_id: str,
        vote: VoteChoice,
        previous_vote: VoteChoice | None = None,
    ) -> VoteTally:
        """Send the alumnus' new vote and return the resulting tally.

        Raises:
            NetworkError: Transport failure, timeout, or 5xx
            ConflictError: Stored vote differs from ``previous_vote``
            ValidationError: Unknown thread or rejected payload
        """
        pass

    @abstractmethod
    async def fetch_tally(self, thread_id: str) -> VoteTally:
        """Read the current tally, including the alumnus' stored vote."""
        pass

    @abstractmethod
    async def fetch_thread(self, thread_id: str) -> ThreadSeed:
        """Read the seed data for a controller."""
        pass


class HttpVoteAggregator(VoteAggregator):
    """Vote aggregator reached over HTTP with httpx."""

    def __init__(self, client: httpx.AsyncClient, alumni_id: str | None = None) -> None:
        """Initialize aggregator.

        Args:
            client: HTTP client whose base URL points at the API
            alumni_id: Identity sent with every request, if known
        """
        self.client = client
        self.alumni_id = alumni_id

    @classmethod
    def from_settings(
        cls,
        settings: VoteClientSettings,
        alumni_id: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "HttpVoteAggregator":
        """Build an aggregator with its own HTTP client."""
        client = httpx.AsyncClient(
            base_url=settings.base_url,
            timeout=settings.timeout_seconds,
            transport=transport,
        )
        return cls(client, alumni_id=alumni_id)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "HttpVoteAggregator":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def submit_vote(
        self,
        thread_id: str,
        vote: VoteChoice,
        previous_vote: VoteChoice | None = None,
    ) -> VoteTally:
        payload: dict[str, str] = {"vote": vote.value}
        if previous_vote is not None:
            payload["previous_vote"] = previous_vote.value

        response = await self._request("POST", f"/threads/{thread_id}/vote", payload)
        return self._parse(VoteTally, response)

    async def fetch_tally(self, thread_id: str) -> VoteTally:
        response = await self._request("GET", f"/threads/{thread_id}/votes")
        return self._parse(VoteTally, response)

    async def fetch_thread(self, thread_id: str) -> ThreadSeed:
        response = await self._request("GET", f"/threads/{thread_id}")
        return self._parse(ThreadSeed, response)

    def _headers(self) -> dict[str, str]:
        return {ALUMNI_ID_HEADER: self.alumni_id} if self.alumni_id else {}

    async def _request(
        self, method: str, path: str, payload: dict[str, str] | None = None
    ) -> httpx.Response:
        try:
            response = await self.client.request(
                method, path, json=payload, headers=self._headers()
            )
        except httpx.HTTPError as e:
            logfire.warn("Vote aggregator unreachable", path=path, error=str(e))
            raise NetworkError(f"HTTP error talking to vote aggregator: {e}")

        if response.is_success:
            return response

        if response.status_code >= 500:
            raise NetworkError(
                f"Vote aggregator failed: {response.status_code}",
                status_code=response.status_code,
            )
        if response.status_code == 409:
            raise ConflictError(
                "Vote changed on the server", tally=self._conflict_tally(response)
            )

        logfire.error(
            "Vote aggregator rejected request",
            path=path,
            status_code=response.status_code,
            error=response.text,
        )
        raise ValidationError(
            f"Vote aggregator rejected request: {response.status_code}",
            status_code=response.status_code,
        )

    @staticmethod
    def _conflict_tally(response: httpx.Response) -> VoteTally | None:
        """Tally from a 409 body of the form ``{"detail": {"tally": {...}}}``."""
        try:
            body = response.json()
        except ValueError:
            return None
        detail = body.get("detail") if isinstance(body, dict) else None
        if not isinstance(detail, dict) or not detail.get("tally"):
            return None
        try:
            return VoteTally.model_validate(detail["tally"])
        except PydanticValidationError:
            return None

    @staticmethod
    def _parse(model, response: httpx.Response):
        try:
            return model.model_validate(response.json())
        except (ValueError, PydanticValidationError) as e:
            raise VoteClientError(f"Malformed vote aggregator response: {e}")

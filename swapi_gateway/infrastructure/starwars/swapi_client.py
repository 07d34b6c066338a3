"""
Adapter: SWAPI over HTTP.

Implements StarWarsClientPort with a shared httpx.Client.
Translates upstream outcomes into domain errors:
- 404 -> ResourceNotFoundError
- any other failure (status, transport, timeout, bad JSON, bad shape) -> InternalError
Never retries.
"""

import logging
from typing import Any, Callable, Optional

import httpx

from swapi_gateway.domain.starwars.entities import Resource, ResourceKind, ResourcePage
from swapi_gateway.domain.starwars.errors import InternalError, ResourceNotFoundError
from swapi_gateway.domain.starwars.ports import StarWarsClientPort
from swapi_gateway.infrastructure.starwars.payloads import (
    PayloadError,
    parse_page,
    parse_resource,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


class SwapiHttpClient(StarWarsClientPort):
    """Concrete adapter fetching resources from the public SWAPI.

    httpx.Client is thread-safe, so one instance serves every request
    handled by the server's worker threads.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._http = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            follow_redirects=True,
            headers={"Accept": "application/json"},
        )

    def fetch_by_id(self, kind: ResourceKind, resource_id: int) -> Resource:
        """Return a single resource, e.g. GET /starships/9/.

        Raises:
            ResourceNotFoundError: Upstream answered 404.
            InternalError: Any other upstream or transport failure.
        """
        payload = self._get_json(
            f"/{kind.path}/{resource_id}/",
            not_found=lambda: ResourceNotFoundError(kind.singular, str(resource_id)),
        )
        try:
            return parse_resource(kind, payload)
        except PayloadError as exc:
            logger.error("Malformed %s payload for id=%d: %s", kind.singular, resource_id, exc)
            raise InternalError(str(exc)) from exc

    def fetch_all(self, kind: ResourceKind) -> ResourcePage:
        """Return the first upstream page of a collection, e.g. GET /people/.

        Raises:
            ResourceNotFoundError: Upstream answered 404.
            InternalError: Any other upstream or transport failure.
        """
        payload = self._get_json(
            f"/{kind.path}/",
            not_found=lambda: ResourceNotFoundError(kind.plural),
        )
        try:
            return parse_page(kind, payload)
        except PayloadError as exc:
            logger.error("Malformed %s list payload: %s", kind.plural, exc)
            raise InternalError(str(exc)) from exc

    def close(self) -> None:
        """Release the underlying connection pool."""
        self._http.close()

    def _get_json(
        self, path: str, not_found: Callable[[], ResourceNotFoundError]
    ) -> Any:
        try:
            response = self._http.get(path)
        except httpx.HTTPError as exc:
            logger.error("SWAPI request to %s failed: %s", path, type(exc).__name__)
            raise InternalError(str(exc)) from exc

        if response.status_code == httpx.codes.NOT_FOUND:
            logger.warning("SWAPI returned 404 for %s", path)
            raise not_found()

        if not response.is_success:
            logger.error(
                "SWAPI returned unexpected status %d for %s",
                response.status_code,
                path,
            )
            raise InternalError(f"upstream status {response.status_code}")

        try:
            return response.json()
        except ValueError as exc:
            logger.error("SWAPI returned a non-JSON body for %s", path)
            raise InternalError("upstream body is not JSON") from exc

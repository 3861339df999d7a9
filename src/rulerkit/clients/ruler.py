"""
Cortex/Mimir ruler API client.

Tenant-scoped CRUD over rule groups. Every request carries the tenant id in
the X-Scope-OrgID header; basic auth (tenant id, key) is added only when a
key is configured. Rule groups travel as YAML in both directions.

API endpoints:
    POST   /api/prom/rules/{namespace}              - Create/update a rule group
    GET    /api/prom/rules/{namespace}/{groupName}  - Fetch a rule group
    DELETE /api/prom/rules/{namespace}/{groupName}  - Delete a rule group
    DELETE /api/prom/rules/{namespace}              - Delete a whole namespace
    GET    /api/prom/rules[/{namespace}]            - List rule groups
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import httpx
import yaml

from rulerkit.clients.base import BaseHTTPClient
from rulerkit.clients.errors import (
    InvalidAddressError,
    RequestEncodeError,
    ResponseDecodeError,
)
from rulerkit.rules.models import RuleGroup, RuleNamespace, parse_rule_namespaces

if TYPE_CHECKING:
    from rulerkit.config.settings import Settings

RULES_API_PATH = "/api/prom/rules"
TENANT_HEADER = "X-Scope-OrgID"


@dataclass(frozen=True)
class RulerClientConfig:
    """Connection settings of a ruler client."""

    address: str
    id: str
    key: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"key": self.key, "address": self.address, "id": self.id}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RulerClientConfig:
        return cls(
            address=str(data.get("address") or ""),
            id=str(data.get("id") or ""),
            key=str(data.get("key") or ""),
        )


def _parse_address(address: str) -> httpx.URL:
    try:
        url = httpx.URL(address)
    except (httpx.InvalidURL, TypeError) as exc:
        raise InvalidAddressError(
            f"invalid ruler address: {exc}", details={"address": address}
        ) from exc

    if not url.is_absolute_url or not url.host:
        raise InvalidAddressError(
            "ruler address must be an absolute URL", details={"address": address}
        )
    return url


class RulerClient(BaseHTTPClient):
    """Get and load rule groups into a Cortex/Mimir ruler.

    The client keeps no mutable state between calls, so one instance can be
    shared by concurrent tasks. Errors are never retried.
    """

    def __init__(
        self,
        config: RulerClientConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
        logger: Any = None,
    ) -> None:
        endpoint = _parse_address(config.address)
        super().__init__(
            str(endpoint),
            timeout=timeout,
            http_client=http_client,
            logger=logger,
        )
        self._config = config
        self._owns_http_client = False

        self._logger.debug("ruler_client_created", address=config.address, id=config.id)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        http_client: httpx.AsyncClient | None = None,
        logger: Any = None,
    ) -> RulerClient:
        """Build a client from environment settings."""
        from rulerkit.config.loader import load_client_config

        return cls(
            load_client_config(settings=settings),
            http_client=http_client,
            timeout=settings.http_timeout,
            logger=logger,
        )

    @property
    def config(self) -> RulerClientConfig:
        return self._config

    async def __aenter__(self) -> RulerClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self._timeout)
            self._owns_http_client = True
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the connection pool opened by ``async with``, if any."""
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
            self._owns_http_client = False

    def _headers(self) -> dict[str, str]:
        return {TENANT_HEADER: self._config.id}

    def _auth(self) -> tuple[str, str] | None:
        if self._config.key:
            return (self._config.id, self._config.key)
        return None

    async def _do_request(self, path: str, method: str, payload: bytes | str | None = None) -> bytes:
        return await self._request(method, path, content=payload)

    async def create_rule_group(self, namespace: str, group: RuleGroup) -> None:
        """Create (or replace) a rule group in a namespace."""
        try:
            payload = group.to_yaml()
        except yaml.YAMLError as exc:
            raise RequestEncodeError(
                "failed to perform request",
                details={"namespace": namespace, "group": group.name, "error": str(exc)},
            ) from exc

        await self._do_request(f"{RULES_API_PATH}/{namespace}", "POST", payload)

    async def delete_rule_group(self, namespace: str, group_name: str) -> None:
        """Delete a single rule group.

        A missing group raises ResourceNotFoundError, which callers may treat
        as success.
        """
        await self._do_request(f"{RULES_API_PATH}/{namespace}/{group_name}", "DELETE")

    async def delete_namespace(self, namespace: str) -> None:
        """Delete every rule group of a namespace."""
        await self._do_request(f"{RULES_API_PATH}/{namespace}", "DELETE")

    async def get_rule_group(self, namespace: str, group_name: str) -> RuleGroup:
        """Retrieve a rule group."""
        body = await self._do_request(f"{RULES_API_PATH}/{namespace}/{group_name}", "GET")

        try:
            return RuleGroup.from_yaml(body)
        except (yaml.YAMLError, ValueError) as exc:
            self._logger.debug(
                "ruler_rule_group_unmarshal_failed",
                body=body.decode("utf-8", errors="replace"),
            )
            raise ResponseDecodeError(
                "unable to unmarshal response",
                details={"namespace": namespace, "group": group_name, "error": str(exc)},
            ) from exc

    async def list_rules(self, namespace: str = "") -> dict[str, RuleNamespace]:
        """List rule groups, of every namespace when ``namespace`` is empty."""
        path = RULES_API_PATH
        if namespace:
            path = f"{path}/{namespace}"

        body = await self._do_request(path, "GET")

        try:
            return parse_rule_namespaces(body)
        except (yaml.YAMLError, ValueError) as exc:
            self._logger.debug(
                "ruler_rules_unmarshal_failed",
                body=body.decode("utf-8", errors="replace"),
            )
            raise ResponseDecodeError(
                "unable to unmarshal response",
                details={"namespace": namespace, "error": str(exc)},
            ) from exc

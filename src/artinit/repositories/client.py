"""Minimal Artifactory REST client.

Only the repository configuration endpoints used by init are covered:
- GET /api/repositories/{key}  (existence check)
- PUT /api/repositories/{key}  (creation)

HTTPS connections verify certificates against certifi's CA bundle.
"""

from __future__ import annotations

import base64
import json
import ssl
from typing import Any, Dict, Optional, Tuple
from urllib.error import HTTPError, URLError
from urllib.parse import quote
from urllib.request import Request, urlopen

import certifi

from artinit.config.servers import ServerDetails
from artinit.core.errors import ProvisioningError
from artinit.core.logging import get_logger

LOGGER = get_logger(__name__)

DEFAULT_TIMEOUT = 30.0


def get_ssl_context() -> ssl.SSLContext:
    """Get an SSL context that uses certifi's CA bundle."""
    return ssl.create_default_context(cafile=certifi.where())


class ArtifactoryClient:
    """Talks to one configured Artifactory server."""

    def __init__(self, server: ServerDetails, timeout: float = DEFAULT_TIMEOUT) -> None:
        if not server.url:
            raise ProvisioningError(f"Server '{server.server_id}' has no URL configured")
        self.server = server
        self.timeout = timeout

    def repository_exists(self, key: str) -> bool:
        """Check whether a repository exists.

        Raises:
            ProvisioningError: On transport errors or unexpected statuses.
        """
        status, body = self._request("GET", f"api/repositories/{quote(key)}")
        if status == 200:
            return True
        # Artifactory answers 400 for unknown repository keys
        if status in (400, 404):
            return False
        raise ProvisioningError(
            f"Failed to look up repository '{key}' on '{self.server.server_id}': "
            f"HTTP {status} {_summarize(body)}"
        )

    def create_repository(self, key: str, params: Dict[str, Any]) -> None:
        """Create a repository from its JSON configuration.

        Raises:
            ProvisioningError: If the server rejects the request.
        """
        status, body = self._request("PUT", f"api/repositories/{quote(key)}", params)
        if status not in (200, 201):
            raise ProvisioningError(
                f"Failed to create repository '{key}' on '{self.server.server_id}': "
                f"HTTP {status} {_summarize(body)}"
            )

    def _request(
        self,
        method: str,
        path: str,
        payload: Optional[Dict[str, Any]] = None,
    ) -> Tuple[int, bytes]:
        url = f"{self.server.url.rstrip('/')}/{path}"
        data = json.dumps(payload).encode("utf-8") if payload is not None else None

        request = Request(url, data=data, method=method)
        request.add_header("Accept", "application/json")
        if data is not None:
            request.add_header("Content-Type", "application/json")
        auth = self._auth_header()
        if auth:
            request.add_header("Authorization", auth)

        context = get_ssl_context() if url.startswith("https://") else None

        LOGGER.debug(f"{method} {url}")
        try:
            with urlopen(request, timeout=self.timeout, context=context) as response:  # nosec B310
                return response.status, response.read()
        except HTTPError as e:
            return e.code, e.read()
        except URLError as e:
            raise ProvisioningError(
                f"Failed to reach server '{self.server.server_id}' at {self.server.url}: {e.reason}"
            ) from e

    def _auth_header(self) -> Optional[str]:
        if self.server.access_token:
            return f"Bearer {self.server.access_token}"
        if self.server.user:
            credentials = f"{self.server.user}:{self.server.password or ''}"
            return "Basic " + base64.b64encode(credentials.encode("utf-8")).decode("ascii")
        return None


def _summarize(body: bytes, limit: int = 200) -> str:
    text = body.decode("utf-8", errors="replace").strip()
    return text if len(text) <= limit else text[:limit] + "..."

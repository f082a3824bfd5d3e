import logging
from dataclasses import dataclass
from typing import Optional, Protocol
from urllib.parse import quote

import httpx

from server.models.learning_path import ModuleStatus
from ui.config import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateResult:
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class PathStore(Protocol):
    async def update_module_status(self, path_id: str, module_id: str, status: ModuleStatus) -> UpdateResult:
        ...


class HttpPathStore:
    """PathStore backed by the learning path API.

    A response with an error status comes back as ``UpdateResult(error=...)``.
    Transport failures (connection refused, timeouts) are raised as
    ``httpx.HTTPError`` for the caller to handle.
    """

    def __init__(self, base_url: str = settings.API_BASE_URL, timeout: float = settings.REQUEST_TIMEOUT,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def update_module_status(self, path_id: str, module_id: str, status: ModuleStatus) -> UpdateResult:
        url = f"{self.base_url}/paths/{quote(path_id, safe='')}/modules/{quote(module_id, safe='')}/status"
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.patch(url, json={"status": ModuleStatus(status).value})
        if response.is_error:
            try:
                detail = response.json()["detail"]
            except (ValueError, KeyError, TypeError):
                detail = response.text
            return UpdateResult(error=f"{response.status_code}: {detail}")
        return UpdateResult()

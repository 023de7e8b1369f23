from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import requests

from ..core.constants import DEFAULT_REQUEST_TIMEOUT


@dataclass
class BackendConfig:
    url: str
    service_role_key: str
    timeout: int = DEFAULT_REQUEST_TIMEOUT


class BackendConnection:
    """Singleton-like HTTP session factory for the hosted backend.

    Note: one pooled ``requests.Session`` per process; every call sends the
    service-role key, so row-level security does not apply to these reads.
    """

    _instance: Optional["BackendConnection"] = None

    def __init__(self, config: BackendConfig, *, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session or requests.Session()

    @classmethod
    def get_instance(cls, config: BackendConfig) -> "BackendConnection":
        if cls._instance is None:
            cls._instance = BackendConnection(config)
        return cls._instance

    @property
    def config(self) -> BackendConfig:
        return self._config

    @property
    def session(self) -> requests.Session:
        return self._session

    def url(self, path: str) -> str:
        return f"{self._config.url.rstrip('/')}/{path.lstrip('/')}"

    def headers(self, *, bearer: Optional[str] = None) -> dict:
        return {
            "apikey": self._config.service_role_key,
            "Authorization": f"Bearer {bearer or self._config.service_role_key}",
            "Content-Type": "application/json",
        }

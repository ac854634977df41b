"""
Detection of the GCP runtime environment the application runs on.
"""

import os
from abc import ABC, abstractmethod
from enum import Enum
from google.auth.compute_engine import _metadata
from google.auth.transport import requests as google_auth_requests
from gcp_common.config import Config
from gcp_common.logging import get_logger

logger = get_logger(__name__)


class GcpEnvironment(str, Enum):
    """GCP runtime environments."""

    UNKNOWN = "UNKNOWN"
    APP_ENGINE_FLEXIBLE = "APP_ENGINE_FLEXIBLE"
    APP_ENGINE_STANDARD = "APP_ENGINE_STANDARD"
    KUBERNETES_ENGINE = "KUBERNETES_ENGINE"
    COMPUTE_ENGINE = "COMPUTE_ENGINE"

    def __str__(self) -> str:
        return self.name


class GcpEnvironmentProvider(ABC):
    """Reports the environment the application is currently running on."""

    @abstractmethod
    def get_current_environment(self) -> GcpEnvironment:
        ...


class DefaultGcpEnvironmentProvider(GcpEnvironmentProvider):
    """
    Detects the environment from runtime env vars and the metadata server.

    Detection order:
    1. GAE_INSTANCE set: App Engine (standard when GAE_ENV=standard, else flexible)
    2. KUBERNETES_SERVICE_HOST set: Kubernetes Engine
    3. Metadata server answers: Compute Engine
    4. Otherwise UNKNOWN

    Nothing is cached; every call re-detects.
    """

    def get_current_environment(self) -> GcpEnvironment:
        if os.getenv("GAE_INSTANCE"):
            if os.getenv("GAE_ENV") == "standard":
                return GcpEnvironment.APP_ENGINE_STANDARD
            return GcpEnvironment.APP_ENGINE_FLEXIBLE

        if os.getenv("KUBERNETES_SERVICE_HOST"):
            return GcpEnvironment.KUBERNETES_ENGINE

        if self._metadata_server_available():
            return GcpEnvironment.COMPUTE_ENGINE

        return GcpEnvironment.UNKNOWN

    def _metadata_server_available(self) -> bool:
        available = _metadata.ping(
            google_auth_requests.Request(),
            timeout=Config.METADATA_PING_TIMEOUT_SECONDS,
            retry_count=1,
        )
        logger.debug(f"Metadata server available: {available}")
        return available

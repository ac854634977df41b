"""
GCP project ID resolution.
"""

from abc import ABC, abstractmethod
from typing import Optional
import google.auth
from google.auth.exceptions import DefaultCredentialsError
from gcp_common.config import Config
from gcp_common.logging import get_logger

logger = get_logger(__name__)


class GcpProjectIdProvider(ABC):
    """Supplies the ID of the project the application runs against."""

    @abstractmethod
    def get_project_id(self) -> Optional[str]:
        ...


class StaticProjectIdProvider(GcpProjectIdProvider):
    """Always returns the project ID it was built with."""

    def __init__(self, project_id: Optional[str]):
        self._project_id = project_id

    def get_project_id(self) -> Optional[str]:
        return self._project_id


class DefaultGcpProjectIdProvider(GcpProjectIdProvider):
    """Resolves the project from configuration, then Application Default Credentials.

    Returns None when neither source knows the project.
    """

    def get_project_id(self) -> Optional[str]:
        project_id = Config.get_project_id()
        if project_id:
            return project_id

        try:
            _, project_id = google.auth.default()
        except DefaultCredentialsError as e:
            logger.debug(f"No default credentials to read a project ID from: {e}")
            return None
        return project_id

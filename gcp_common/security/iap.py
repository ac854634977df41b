"""
Audience strings for Identity-Aware Proxy identity tokens.
"""

from abc import ABC, abstractmethod
from typing import Optional
from gcp_common.core.project import GcpProjectIdProvider
from gcp_common.logging import get_logger
from gcp_common.security.resource_manager import CloudResourceManager, ResourceManager

logger = get_logger(__name__)


class AudienceProvider(ABC):
    """Supplies the audience an IAP identity token is expected to carry."""

    @abstractmethod
    def get_audience(self) -> str:
        ...


class AppEngineAudienceProvider(AudienceProvider):
    """
    Builds the App Engine IAP audience "/projects/<number>/apps/<project id>".

    The project number comes from Cloud Resource Manager; both lookups are
    repeated on every call.
    """

    def __init__(self, project_id_provider: Optional[GcpProjectIdProvider]):
        if project_id_provider is None:
            raise ValueError("GcpProjectIdProvider cannot be null.")
        self._project_id_provider = project_id_provider
        self._resource_manager: Optional[ResourceManager] = None

    @property
    def resource_manager(self) -> ResourceManager:
        if self._resource_manager is None:
            self._resource_manager = CloudResourceManager()
        return self._resource_manager

    @resource_manager.setter
    def resource_manager(self, resource_manager: Optional[ResourceManager]) -> None:
        if resource_manager is None:
            raise ValueError("ResourceManager cannot be null.")
        self._resource_manager = resource_manager

    def set_resource_manager(self, resource_manager: Optional[ResourceManager]) -> None:
        self.resource_manager = resource_manager

    def get_audience(self) -> str:
        project_id = self._project_id_provider.get_project_id()
        project = self.resource_manager.get(project_id)
        if project is None:
            raise ValueError(
                "Project expected not to be null. Is Cloud Resource Manager API enabled? "
                "(https://console.developers.google.com/apis/api/cloudresourcemanager.googleapis.com)"
            )
        if project.project_number is None:
            raise ValueError("Project Number expected not to be null.")
        # The lookup may have accepted a None key
        if project_id is None:
            raise ValueError("Project Id expected not to be null.")

        audience = f"/projects/{project.project_number}/apps/{project_id}"
        logger.debug(f"Resolved IAP audience {audience}")
        return audience

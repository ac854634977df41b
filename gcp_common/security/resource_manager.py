"""
Project lookups against Cloud Resource Manager.
"""

from abc import ABC, abstractmethod
from typing import Optional
from google.api_core import exceptions
from google.cloud import resourcemanager_v3
from pydantic import BaseModel
from gcp_common.logging import get_logger, log_warning

logger = get_logger(__name__)


class ProjectRecord(BaseModel):
    """A project as known to the directory."""

    project_id: Optional[str] = None
    project_number: Optional[int] = None


class ResourceManager(ABC):
    """Looks projects up by ID."""

    @abstractmethod
    def get(self, project_id: Optional[str]) -> Optional[ProjectRecord]:
        """Return the project record, or None if the directory has no such project."""


class CloudResourceManager(ResourceManager):
    """ResourceManager backed by the Cloud Resource Manager v3 API."""

    def __init__(self, client: Optional[resourcemanager_v3.ProjectsClient] = None):
        self._client = client or resourcemanager_v3.ProjectsClient()

    def get(self, project_id: Optional[str]) -> Optional[ProjectRecord]:
        if not project_id:
            return None
        try:
            project = self._client.get_project(name=f"projects/{project_id}")
        except exceptions.NotFound:
            log_warning("Project not found in Cloud Resource Manager", project_id=project_id)
            return None

        # v3 names projects by number: "projects/<number>"
        _, _, number = project.name.rpartition("/")
        logger.debug(f"Resolved project {project_id} to {project.name}")
        return ProjectRecord(
            project_id=project.project_id or project_id,
            project_number=int(number) if number.isdigit() else None,
        )

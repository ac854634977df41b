"""
Identity-Aware Proxy helpers.
"""

from gcp_common.security.iap import AppEngineAudienceProvider, AudienceProvider
from gcp_common.security.resource_manager import (
    CloudResourceManager,
    ProjectRecord,
    ResourceManager,
)

__all__ = [
    "AppEngineAudienceProvider",
    "AudienceProvider",
    "CloudResourceManager",
    "ProjectRecord",
    "ResourceManager",
]

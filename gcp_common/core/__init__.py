"""
Project and runtime environment detection.
"""

from gcp_common.core.environment import (
    DefaultGcpEnvironmentProvider,
    GcpEnvironment,
    GcpEnvironmentProvider,
)
from gcp_common.core.project import (
    DefaultGcpProjectIdProvider,
    GcpProjectIdProvider,
    StaticProjectIdProvider,
)

__all__ = [
    "DefaultGcpEnvironmentProvider",
    "GcpEnvironment",
    "GcpEnvironmentProvider",
    "DefaultGcpProjectIdProvider",
    "GcpProjectIdProvider",
    "StaticProjectIdProvider",
]

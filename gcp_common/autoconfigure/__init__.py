"""
Conditional configuration gated on the GCP runtime environment.
"""

from gcp_common.autoconfigure.condition import (
    ConditionOutcome,
    OnGcpEnvironmentCondition,
    matches_gcp_environment,
)
from gcp_common.autoconfigure.context import (
    CONDITIONAL_ON_GCP_ENVIRONMENT,
    ConditionContext,
    ServiceRegistry,
    TypeMetadata,
    conditional_on_gcp_environment,
)
from gcp_common.autoconfigure.registry import (
    ActivatedConfiguration,
    AutoConfigurationRegistry,
)

__all__ = [
    "ActivatedConfiguration",
    "AutoConfigurationRegistry",
    "CONDITIONAL_ON_GCP_ENVIRONMENT",
    "ConditionContext",
    "ConditionOutcome",
    "OnGcpEnvironmentCondition",
    "ServiceRegistry",
    "TypeMetadata",
    "conditional_on_gcp_environment",
    "matches_gcp_environment",
]

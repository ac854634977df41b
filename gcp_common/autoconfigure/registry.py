"""
Registry of configuration classes activated according to their conditions.
"""

from typing import List, NamedTuple, Optional
from gcp_common.autoconfigure.condition import ConditionOutcome, OnGcpEnvironmentCondition
from gcp_common.autoconfigure.context import (
    CONDITIONAL_ON_GCP_ENVIRONMENT,
    ConditionContext,
    TypeMetadata,
)
from gcp_common.logging import log_info


class ActivatedConfiguration(NamedTuple):
    config_cls: type
    instance: Optional[object]
    outcome: ConditionOutcome


class AutoConfigurationRegistry:
    """
    Collects configuration classes and instantiates the ones whose conditions match.

    Classes without a declared condition always activate. Each activate() call
    re-evaluates every condition.
    """

    def __init__(self):
        self._configurations: List[type] = []
        self._condition = OnGcpEnvironmentCondition()

    def register(self, config_cls: type) -> type:
        """Register a configuration class. Usable as a class decorator."""
        self._configurations.append(config_cls)
        return config_cls

    def evaluate(self, context: ConditionContext, config_cls: type) -> ConditionOutcome:
        metadata = TypeMetadata.of(config_cls)
        if not metadata.is_annotated(CONDITIONAL_ON_GCP_ENVIRONMENT):
            return ConditionOutcome(match=True, message="No condition declared")
        return self._condition.get_match_outcome(context, metadata)

    def activate(self, context: ConditionContext) -> List[ActivatedConfiguration]:
        """
        Evaluate all registered classes.

        Returns:
            One entry per registered class, in registration order; instance is
            None for classes whose condition did not match
        """
        results = []
        for config_cls in self._configurations:
            outcome = self.evaluate(context, config_cls)
            instance = config_cls() if outcome.match else None
            log_info(
                "Evaluated configuration",
                configuration=config_cls.__name__,
                match=outcome.match,
                reason=outcome.message,
            )
            results.append(ActivatedConfiguration(config_cls, instance, outcome))
        return results

"""
Environment-gated activation of configuration classes.
"""

from typing import Optional, Sequence, Tuple
from pydantic import BaseModel
from gcp_common.autoconfigure.context import (
    CONDITIONAL_ON_GCP_ENVIRONMENT,
    ConditionContext,
    TypeMetadata,
)
from gcp_common.core.environment import GcpEnvironment, GcpEnvironmentProvider
from gcp_common.logging import get_structured_logger

logger = get_structured_logger(__name__)


class ConditionOutcome(BaseModel):
    """Result of evaluating a condition."""

    match: bool
    message: str


def _require(value, message: str) -> None:
    if value is None:
        raise ValueError(message)


def _as_environments(value) -> Tuple[GcpEnvironment, ...]:
    """Check the declared value is a sequence of GcpEnvironment.

    A wrong shape is a TypeError, not a ValueError: the declaration itself is
    malformed rather than missing.
    """
    if not isinstance(value, (list, tuple)) or not all(
        isinstance(item, GcpEnvironment) for item in value
    ):
        raise TypeError(
            f"{type(value).__name__} cannot be cast to a sequence of GcpEnvironment"
        )
    return tuple(value)


def matches_gcp_environment(
    environments: Sequence[GcpEnvironment], provider: GcpEnvironmentProvider
) -> ConditionOutcome:
    """
    Decide whether the current environment is one of the declared ones.

    The provider is queried exactly once per call.
    """
    current = provider.get_current_environment()
    if current in environments:
        return ConditionOutcome(
            match=True, message=f"Application is running on {current}"
        )
    return ConditionOutcome(
        match=False,
        message="Application is not running on any of "
        + ", ".join(str(environment) for environment in environments),
    )


class OnGcpEnvironmentCondition:
    """Matches when the application runs on one of the declared GCP environments."""

    def get_match_outcome(
        self,
        context: Optional[ConditionContext],
        metadata: Optional[TypeMetadata],
    ) -> ConditionOutcome:
        """
        Evaluate the @conditional_on_gcp_environment declaration in metadata.

        Raises:
            ValueError: If an argument, the registry, the declaration or the
                environment provider is missing
            TypeError: If the declared value is not a sequence of GcpEnvironment
            NoSuchServiceError: If the registry has no GcpEnvironmentProvider entry
        """
        _require(context, "Application context cannot be null.")
        _require(metadata, "AnnotationTypeMetadata cannot be null.")

        registry = context.registry
        _require(registry, "Bean factory cannot be null.")

        attributes = metadata.get_annotation_attributes(CONDITIONAL_ON_GCP_ENVIRONMENT)
        _require(attributes, "@ConditionalOnGcpEnvironment annotation not declared on type.")

        value = attributes.get("value")
        _require(value, "Value attribute of ConditionalOnGcpEnvironment cannot be null.")
        environments = _as_environments(value)

        provider = registry.get(GcpEnvironmentProvider)
        _require(provider, "GcpEnvironmentProvider not found in context.")

        outcome = matches_gcp_environment(environments, provider)
        logger.debug(
            outcome.message,
            match=outcome.match,
            declared=[str(environment) for environment in environments],
        )
        return outcome

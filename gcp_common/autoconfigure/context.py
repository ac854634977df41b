"""
Evaluation context for conditional configuration: a service registry and
declared condition metadata.
"""

from typing import Any, Dict, Optional, Type, TypeVar
from gcp_common.core.environment import GcpEnvironment
from gcp_common.exceptions import NoSuchServiceError

T = TypeVar("T")

CONDITIONAL_ON_GCP_ENVIRONMENT = "ConditionalOnGcpEnvironment"

# Attribute under which decorators record condition metadata on a class
CONDITIONS_ATTRIBUTE = "__gcp_conditions__"


class ServiceRegistry:
    """Maps service types to the instances configuration code may look up."""

    def __init__(self):
        self._services: Dict[type, Any] = {}

    def register(self, service_type: Type[T], instance: Optional[T]) -> None:
        self._services[service_type] = instance

    def get(self, service_type: Type[T]) -> Optional[T]:
        """Return the instance registered for service_type.

        Raises:
            NoSuchServiceError: If nothing was registered for service_type
        """
        if service_type not in self._services:
            raise NoSuchServiceError(service_type)
        return self._services[service_type]

    def __contains__(self, service_type) -> bool:
        return service_type in self._services


class ConditionContext:
    """Context passed to conditions: gives access to the service registry."""

    def __init__(self, registry: Optional[ServiceRegistry]):
        self.registry = registry


class TypeMetadata:
    """Condition attributes declared on a configuration class."""

    def __init__(self, conditions: Optional[Dict[str, Dict[str, Any]]] = None):
        self._conditions = dict(conditions or {})

    @classmethod
    def of(cls, target: type) -> "TypeMetadata":
        return cls(getattr(target, CONDITIONS_ATTRIBUTE, None))

    def get_annotation_attributes(self, name: str) -> Optional[Dict[str, Any]]:
        return self._conditions.get(name)

    def is_annotated(self, name: str) -> bool:
        return name in self._conditions


def conditional_on_gcp_environment(*environments: GcpEnvironment):
    """
    Class decorator: activate the configuration only on the given environments.

    Usage:
        @conditional_on_gcp_environment(GcpEnvironment.APP_ENGINE_STANDARD)
        class AppEngineSecurityConfiguration:
            ...
    """
    if not environments:
        raise ValueError("At least one GcpEnvironment must be declared.")

    def decorate(target: type) -> type:
        conditions = dict(getattr(target, CONDITIONS_ATTRIBUTE, {}))
        conditions[CONDITIONAL_ON_GCP_ENVIRONMENT] = {"value": tuple(environments)}
        setattr(target, CONDITIONS_ATTRIBUTE, conditions)
        return target

    return decorate

"""Tests for AutoConfigurationRegistry."""

from unittest.mock import MagicMock

import pytest

from gcp_common.autoconfigure import (
    AutoConfigurationRegistry,
    ConditionContext,
    ServiceRegistry,
    conditional_on_gcp_environment,
)
from gcp_common.core import GcpEnvironment, GcpEnvironmentProvider


@pytest.fixture
def provider():
    return MagicMock(spec=GcpEnvironmentProvider)


@pytest.fixture
def context(provider):
    registry = ServiceRegistry()
    registry.register(GcpEnvironmentProvider, provider)
    return ConditionContext(registry)


@pytest.fixture
def registry():
    configurations = AutoConfigurationRegistry()

    @configurations.register
    class AlwaysOn:
        pass

    @configurations.register
    @conditional_on_gcp_environment(GcpEnvironment.APP_ENGINE_STANDARD)
    class AppEngineOnly:
        pass

    @configurations.register
    @conditional_on_gcp_environment(
        GcpEnvironment.COMPUTE_ENGINE, GcpEnvironment.KUBERNETES_ENGINE
    )
    class ComputeOnly:
        pass

    return configurations


def test_only_matching_configurations_are_instantiated(registry, context, provider):
    provider.get_current_environment.return_value = GcpEnvironment.KUBERNETES_ENGINE

    results = registry.activate(context)

    assert [r.config_cls.__name__ for r in results] == [
        "AlwaysOn",
        "AppEngineOnly",
        "ComputeOnly",
    ]
    assert [r.instance is not None for r in results] == [True, False, True]
    assert results[1].outcome.message == (
        "Application is not running on any of APP_ENGINE_STANDARD"
    )
    assert results[2].outcome.message == "Application is running on KUBERNETES_ENGINE"


def test_activation_reevaluates_conditions(registry, context, provider):
    provider.get_current_environment.side_effect = [
        GcpEnvironment.APP_ENGINE_STANDARD,
        GcpEnvironment.APP_ENGINE_STANDARD,
        GcpEnvironment.UNKNOWN,
        GcpEnvironment.UNKNOWN,
    ]

    first = registry.activate(context)
    second = registry.activate(context)

    assert first[1].instance is not None
    assert second[1].instance is None


def test_activation_without_provider_fails(registry):
    with pytest.raises(LookupError):
        registry.activate(ConditionContext(ServiceRegistry()))

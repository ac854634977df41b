import pytest

from gcp_common.pubsub import PubSubAdmin, PubSubPublisher, PubSubSubscriber, PubSubTemplate
from tests.fakes import FakeBroker

PROJECT_ID = "test-project"


@pytest.fixture
def broker():
    return FakeBroker()


@pytest.fixture
def admin(broker):
    return PubSubAdmin(PROJECT_ID, broker.publisher, broker.subscriber)


@pytest.fixture
def publisher(broker):
    return PubSubPublisher(PROJECT_ID, broker.publisher)


@pytest.fixture
def subscriber(broker):
    return PubSubSubscriber(PROJECT_ID, broker.subscriber)


@pytest.fixture
def template(admin, publisher, subscriber):
    return PubSubTemplate(PROJECT_ID, admin, publisher, subscriber)

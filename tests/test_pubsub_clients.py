"""Tests for Pub/Sub client singletons and resource names."""

from unittest.mock import patch

import pytest

from gcp_common.pubsub import clients


@pytest.fixture(autouse=True)
def reset_clients(monkeypatch):
    monkeypatch.setattr(clients, "_publisher_client", None)
    monkeypatch.setattr(clients, "_subscriber_client", None)


def test_resource_names():
    assert clients.project_path("p") == "projects/p"
    assert clients.topic_path("p", "t") == "projects/p/topics/t"
    assert clients.subscription_path("p", "s") == "projects/p/subscriptions/s"
    assert clients.topic_path("p", "projects/q/topics/t") == "projects/q/topics/t"


def test_clients_are_created_once():
    with patch.object(clients.pubsub_v1, "PublisherClient") as publisher_cls, patch.object(
        clients.pubsub_v1, "SubscriberClient"
    ) as subscriber_cls:
        assert clients.get_publisher_client() is clients.get_publisher_client()
        assert clients.get_subscriber_client() is clients.get_subscriber_client()

    publisher_cls.assert_called_once_with()
    subscriber_cls.assert_called_once_with()


def test_close_clients_closes_subscriber_channel():
    with patch.object(clients.pubsub_v1, "SubscriberClient") as subscriber_cls:
        subscriber = clients.get_subscriber_client()

    clients.close_clients()

    subscriber.close.assert_called_once_with()
    assert clients._subscriber_client is None
    assert subscriber_cls.return_value is subscriber

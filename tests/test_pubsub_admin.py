"""Tests for topic and subscription lifecycle management."""

import pytest
from google.api_core import exceptions

from gcp_common.config import Config
from gcp_common.pubsub import PubSubAdmin
from tests.conftest import PROJECT_ID


def test_admin_requires_project_id(broker):
    with pytest.raises(ValueError):
        PubSubAdmin("", broker.publisher, broker.subscriber)


def test_create_topic_returns_full_path_and_is_listed(admin):
    path = admin.create_topic("orders")

    assert path == f"projects/{PROJECT_ID}/topics/orders"
    assert path in admin.list_topics()
    assert admin.topic_exists("orders")


def test_create_topic_twice_raises_already_exists(admin):
    admin.create_topic("orders")

    with pytest.raises(exceptions.AlreadyExists):
        admin.create_topic("orders")


def test_delete_topic_removes_it_from_listing(admin):
    admin.create_topic("orders")

    admin.delete_topic("orders")

    assert not admin.topic_exists("orders")


def test_delete_missing_topic_raises_not_found(admin):
    with pytest.raises(exceptions.NotFound):
        admin.delete_topic("missing")


def test_delete_topic_if_exists_skips_absent_topic(admin, broker):
    broker.publisher.delete_topic = None  # any call would fail

    assert admin.delete_topic_if_exists("missing") is False


def test_delete_topic_if_exists_deletes_listed_topic(admin):
    admin.create_topic("orders")

    assert admin.delete_topic_if_exists("orders") is True
    assert not admin.topic_exists("orders")


def test_list_topics_only_returns_own_project(admin, broker):
    broker.topics.add("projects/other-project/topics/orders")
    admin.create_topic("invoices")

    assert admin.list_topics() == [f"projects/{PROJECT_ID}/topics/invoices"]


def test_qualified_names_pass_through(admin):
    path = admin.create_topic(f"projects/{PROJECT_ID}/topics/orders")

    assert path == f"projects/{PROJECT_ID}/topics/orders"


def test_create_subscription_uses_default_ack_deadline(admin, broker):
    admin.create_topic("orders")

    path = admin.create_subscription("orders-sub", "orders")

    assert path == f"projects/{PROJECT_ID}/subscriptions/orders-sub"
    assert broker.subscriptions[path] == f"projects/{PROJECT_ID}/topics/orders"
    assert broker.ack_deadlines[path] == Config.PUBSUB_ACK_DEADLINE_SECONDS == 10


def test_create_subscription_with_explicit_ack_deadline(admin, broker):
    admin.create_topic("orders")

    path = admin.create_subscription("orders-sub", "orders", ack_deadline_seconds=30)

    assert broker.ack_deadlines[path] == 30


def test_create_subscription_on_missing_topic_raises_not_found(admin):
    with pytest.raises(exceptions.NotFound):
        admin.create_subscription("orders-sub", "missing")

    assert not admin.subscription_exists("orders-sub")


def test_create_subscription_twice_raises_already_exists(admin):
    admin.create_topic("orders")
    admin.create_subscription("orders-sub", "orders")

    with pytest.raises(exceptions.AlreadyExists):
        admin.create_subscription("orders-sub", "orders")


def test_subscription_lifecycle(admin):
    admin.create_topic("orders")
    admin.create_subscription("orders-sub", "orders")
    assert admin.subscription_exists("orders-sub")

    admin.delete_subscription("orders-sub")

    assert not admin.subscription_exists("orders-sub")
    with pytest.raises(exceptions.NotFound):
        admin.delete_subscription("orders-sub")


def test_delete_subscription_if_exists(admin):
    admin.create_topic("orders")
    admin.create_subscription("orders-sub", "orders")

    assert admin.delete_subscription_if_exists("orders-sub") is True
    assert admin.delete_subscription_if_exists("orders-sub") is False

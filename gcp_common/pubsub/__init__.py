"""
Google Cloud Pub/Sub utilities for topic/subscription management, publishing and pull delivery.
"""

from gcp_common.pubsub.admin import PubSubAdmin
from gcp_common.pubsub.clients import (
    get_publisher_client,
    get_subscriber_client,
    subscription_path,
    topic_path,
)
from gcp_common.pubsub.models import PulledMessage
from gcp_common.pubsub.publisher import PubSubPublisher
from gcp_common.pubsub.subscriber import PubSubSubscriber
from gcp_common.pubsub.template import PubSubTemplate, get_pubsub_template

__all__ = [
    "PubSubAdmin",
    "PubSubPublisher",
    "PubSubSubscriber",
    "PubSubTemplate",
    "PulledMessage",
    "get_publisher_client",
    "get_subscriber_client",
    "get_pubsub_template",
    "subscription_path",
    "topic_path",
]

"""
Google Cloud Pub/Sub client singletons and resource name helpers.
Supports both Pub/Sub (production) and the Pub/Sub emulator (local development).
"""

from typing import Optional
from google.cloud import pubsub_v1
from gcp_common.config import Config
from gcp_common.logging import log_info

# Global clients (singletons)
_publisher_client: Optional[pubsub_v1.PublisherClient] = None
_subscriber_client: Optional[pubsub_v1.SubscriberClient] = None


def _mode() -> str:
    if Config.PUBSUB_EMULATOR_HOST:
        return f"emulator mode: {Config.PUBSUB_EMULATOR_HOST}"
    return "production mode"


def get_publisher_client() -> pubsub_v1.PublisherClient:
    """Get or create the singleton Pub/Sub publisher client.

    The client library switches to the emulator on its own when
    PUBSUB_EMULATOR_HOST is set in the environment.
    """
    global _publisher_client

    if _publisher_client is None:
        _publisher_client = pubsub_v1.PublisherClient()
        log_info(f"Created Pub/Sub publisher client ({_mode()})")
    return _publisher_client


def get_subscriber_client() -> pubsub_v1.SubscriberClient:
    """Get or create the singleton Pub/Sub subscriber client."""
    global _subscriber_client

    if _subscriber_client is None:
        _subscriber_client = pubsub_v1.SubscriberClient()
        log_info(f"Created Pub/Sub subscriber client ({_mode()})")
    return _subscriber_client


def close_clients() -> None:
    """Close the subscriber channel and drop both client references."""
    global _publisher_client, _subscriber_client

    if _subscriber_client is not None:
        _subscriber_client.close()
    _publisher_client = None
    _subscriber_client = None
    log_info("Pub/Sub client references reset")


def project_path(project_id: str) -> str:
    return f"projects/{project_id}"


def topic_path(project_id: str, topic_name: str) -> str:
    """Format projects/<project>/topics/<name>; qualified names pass through."""
    if topic_name.startswith("projects/"):
        return topic_name
    return f"projects/{project_id}/topics/{topic_name}"


def subscription_path(project_id: str, subscription_name: str) -> str:
    """Format projects/<project>/subscriptions/<name>; qualified names pass through."""
    if subscription_name.startswith("projects/"):
        return subscription_name
    return f"projects/{project_id}/subscriptions/{subscription_name}"

"""
Topic and subscription lifecycle management.
"""

from typing import List, Optional
from google.api_core import exceptions
from google.cloud import pubsub_v1
from gcp_common.config import Config
from gcp_common.logging import get_logger, log_info, log_warning
from gcp_common.pubsub.clients import (
    get_publisher_client,
    get_subscriber_client,
    project_path,
    subscription_path,
    topic_path,
)

logger = get_logger(__name__)


class PubSubAdmin:
    """Creates, lists and deletes topics and subscriptions in one project.

    Create and delete are not idempotent: AlreadyExists and NotFound from the
    broker propagate. Use the *_if_exists helpers for cleanup.
    """

    def __init__(
        self,
        project_id: str,
        publisher_client: Optional[pubsub_v1.PublisherClient] = None,
        subscriber_client: Optional[pubsub_v1.SubscriberClient] = None,
    ):
        if not project_id:
            raise ValueError("project_id must be provided to PubSubAdmin")
        self.project_id = project_id
        self._publisher = publisher_client or get_publisher_client()
        self._subscriber = subscriber_client or get_subscriber_client()

    def topic_path(self, topic_name: str) -> str:
        return topic_path(self.project_id, topic_name)

    def subscription_path(self, subscription_name: str) -> str:
        return subscription_path(self.project_id, subscription_name)

    # Topics

    def create_topic(self, topic_name: str) -> str:
        """Create a topic and return its full path."""
        path = self.topic_path(topic_name)
        try:
            self._publisher.create_topic(request={"name": path})
        except exceptions.AlreadyExists:
            log_warning("Topic already exists", topic=path)
            raise
        log_info("Created topic", topic=path)
        return path

    def delete_topic(self, topic_name: str) -> None:
        path = self.topic_path(topic_name)
        try:
            self._publisher.delete_topic(request={"topic": path})
        except exceptions.NotFound:
            log_warning("Topic not found, nothing deleted", topic=path)
            raise
        log_info("Deleted topic", topic=path)

    def list_topics(self) -> List[str]:
        """Full names of every topic in the project (all pages)."""
        pager = self._publisher.list_topics(
            request={"project": project_path(self.project_id)}
        )
        return [topic.name for topic in pager]

    def topic_exists(self, topic_name: str) -> bool:
        return self.topic_path(topic_name) in self.list_topics()

    def delete_topic_if_exists(self, topic_name: str) -> bool:
        """Delete the topic only if it shows up in the project listing."""
        if not self.topic_exists(topic_name):
            logger.debug(f"Topic {topic_name} not listed, skipping delete")
            return False
        self.delete_topic(topic_name)
        return True

    # Subscriptions

    def create_subscription(
        self,
        subscription_name: str,
        topic_name: str,
        ack_deadline_seconds: Optional[int] = None,
    ) -> str:
        """
        Create a pull subscription bound to an existing topic.

        Args:
            subscription_name: Short or fully-qualified subscription name
            topic_name: Short or fully-qualified topic name; must exist
            ack_deadline_seconds: Defaults to Config.PUBSUB_ACK_DEADLINE_SECONDS

        Returns:
            Full subscription path

        Raises:
            NotFound: If the topic does not exist
            AlreadyExists: If the subscription already exists
        """
        if ack_deadline_seconds is None:
            ack_deadline_seconds = Config.PUBSUB_ACK_DEADLINE_SECONDS
        path = self.subscription_path(subscription_name)
        topic = self.topic_path(topic_name)
        try:
            self._subscriber.create_subscription(
                request={
                    "name": path,
                    "topic": topic,
                    "ack_deadline_seconds": ack_deadline_seconds,
                }
            )
        except exceptions.NotFound:
            log_warning(
                "Topic not found, subscription not created",
                topic=topic,
                subscription=path,
            )
            raise
        except exceptions.AlreadyExists:
            log_warning("Subscription already exists", subscription=path)
            raise
        log_info(
            "Created subscription",
            subscription=path,
            topic=topic,
            ack_deadline_seconds=ack_deadline_seconds,
        )
        return path

    def delete_subscription(self, subscription_name: str) -> None:
        path = self.subscription_path(subscription_name)
        try:
            self._subscriber.delete_subscription(request={"subscription": path})
        except exceptions.NotFound:
            log_warning("Subscription not found, nothing deleted", subscription=path)
            raise
        log_info("Deleted subscription", subscription=path)

    def list_subscriptions(self) -> List[str]:
        """Full names of every subscription in the project (all pages)."""
        pager = self._subscriber.list_subscriptions(
            request={"project": project_path(self.project_id)}
        )
        return [subscription.name for subscription in pager]

    def subscription_exists(self, subscription_name: str) -> bool:
        return self.subscription_path(subscription_name) in self.list_subscriptions()

    def delete_subscription_if_exists(self, subscription_name: str) -> bool:
        """Delete the subscription only if it shows up in the project listing."""
        if not self.subscription_exists(subscription_name):
            logger.debug(f"Subscription {subscription_name} not listed, skipping delete")
            return False
        self.delete_subscription(subscription_name)
        return True

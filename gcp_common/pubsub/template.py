"""
Single entry point for topic/subscription lifecycle, publishing and delivery.
"""

from typing import Callable, Dict, Iterable, List, Optional, Sequence, Union
from gcp_common.core.project import DefaultGcpProjectIdProvider
from gcp_common.logging import get_logger, log_info
from gcp_common.pubsub.admin import PubSubAdmin
from gcp_common.pubsub.models import PulledMessage
from gcp_common.pubsub.publisher import Payload, PubSubPublisher
from gcp_common.pubsub.subscriber import PubSubSubscriber

logger = get_logger(__name__)


class PubSubTemplate:
    """Groups the admin, publisher and subscriber of one project.

    All calls are synchronous and make at most one broker round trip per
    resource; nothing is retried.
    """

    def __init__(
        self,
        project_id: Optional[str] = None,
        admin: Optional[PubSubAdmin] = None,
        publisher: Optional[PubSubPublisher] = None,
        subscriber: Optional[PubSubSubscriber] = None,
    ):
        """
        Initialize the template.

        Args:
            project_id: GCP project ID. If None, uses Config.get_project_id() or
                       the project of the Application Default Credentials.
        """
        self.project_id = project_id or DefaultGcpProjectIdProvider().get_project_id()
        if not self.project_id:
            raise ValueError(
                "GCP_PROJECT_ID must be set in environment or passed to PubSubTemplate"
            )

        self.admin = admin or PubSubAdmin(self.project_id)
        self.publisher = publisher or PubSubPublisher(self.project_id)
        self.subscriber = subscriber or PubSubSubscriber(self.project_id)
        log_info(f"Initialized PubSubTemplate for project: {self.project_id}")

    def create_topic(self, topic_name: str) -> str:
        return self.admin.create_topic(topic_name)

    def delete_topic(self, topic_name: str) -> None:
        self.admin.delete_topic(topic_name)

    def create_subscription(
        self,
        subscription_name: str,
        topic_name: str,
        ack_deadline_seconds: Optional[int] = None,
    ) -> str:
        return self.admin.create_subscription(
            subscription_name, topic_name, ack_deadline_seconds
        )

    def delete_subscription(self, subscription_name: str) -> None:
        self.admin.delete_subscription(subscription_name)

    def publish(
        self,
        topic_name: str,
        payload: Payload,
        count: int = 1,
        attributes: Optional[Dict[str, str]] = None,
    ) -> List[str]:
        return self.publisher.publish(topic_name, payload, count, attributes)

    def pull(
        self, subscription_name: str, max_messages: Optional[int] = None
    ) -> List[PulledMessage]:
        return self.subscriber.pull(subscription_name, max_messages)

    def acknowledge(self, subscription_name: str, ack_ids: Iterable[str]) -> None:
        self.subscriber.acknowledge(subscription_name, ack_ids)

    def multi_acknowledge(
        self,
        subscription_names: Sequence[str],
        payload_match: Optional[Union[bytes, str]] = None,
    ) -> Dict[str, List[PulledMessage]]:
        return self.subscriber.multi_acknowledge(subscription_names, payload_match)

    def subscribe(self, subscription_name: str, callback: Optional[Callable] = None):
        return self.subscriber.subscribe(subscription_name, callback)


# Singleton instance
_pubsub_template: Optional[PubSubTemplate] = None


def get_pubsub_template() -> PubSubTemplate:
    """Get the singleton PubSubTemplate instance."""
    global _pubsub_template
    if _pubsub_template is None:
        _pubsub_template = PubSubTemplate()
    return _pubsub_template

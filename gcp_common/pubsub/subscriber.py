"""
Pull-based delivery: pull, acknowledge and streaming subscribe.
"""

from typing import Callable, Dict, Iterable, List, Optional, Sequence, Union
from google.cloud import pubsub_v1
from google.cloud.pubsub_v1.subscriber.message import Message
from gcp_common.config import Config
from gcp_common.logging import get_logger, get_structured_logger, log_info
from gcp_common.pubsub.clients import get_subscriber_client, subscription_path
from gcp_common.pubsub.models import PulledMessage

logger = get_logger(__name__)
structured_logger = get_structured_logger(__name__)


class PubSubSubscriber:
    """Consumes messages from subscriptions of one project.

    pull() never waits for new arrivals. Waiting for eventually visible
    messages is the caller's job (see gcp_common.testing.await_until).
    """

    def __init__(
        self,
        project_id: str,
        client: Optional[pubsub_v1.SubscriberClient] = None,
    ):
        if not project_id:
            raise ValueError("project_id must be provided to PubSubSubscriber")
        self.project_id = project_id
        self._client = client or get_subscriber_client()

    def _get_subscription_path(self, subscription_name: str) -> str:
        return subscription_path(self.project_id, subscription_name)

    def pull(
        self, subscription_name: str, max_messages: Optional[int] = None
    ) -> List[PulledMessage]:
        """
        Pull up to max_messages pending messages, returning immediately.

        Args:
            subscription_name: Short or fully-qualified subscription name
            max_messages: Batch size bound, defaults to Config.PUBSUB_PULL_MAX_MESSAGES

        Returns:
            The pulled messages, possibly empty

        Raises:
            ValueError: If max_messages is less than 1
            NotFound: If the subscription does not exist
        """
        if max_messages is None:
            max_messages = Config.PUBSUB_PULL_MAX_MESSAGES
        if max_messages < 1:
            raise ValueError(f"max_messages must be at least 1, got {max_messages}")

        path = self._get_subscription_path(subscription_name)
        response = self._client.pull(
            request={
                "subscription": path,
                "max_messages": max_messages,
                "return_immediately": True,
            }
        )
        messages = [
            PulledMessage.from_received(received)
            for received in response.received_messages
        ]
        structured_logger.debug(
            "Pulled messages", subscription=path, count=len(messages)
        )
        return messages

    def pull_payloads(
        self, subscription_name: str, max_messages: Optional[int] = None
    ) -> List[str]:
        """Pull without acknowledging and return the UTF-8 payloads."""
        return [message.text for message in self.pull(subscription_name, max_messages)]

    def acknowledge(self, subscription_name: str, ack_ids: Iterable[str]) -> None:
        """Remove the referenced messages from this subscription's backlog.

        An empty handle list sends nothing.
        """
        ack_ids = list(ack_ids)
        if not ack_ids:
            return
        path = self._get_subscription_path(subscription_name)
        self._client.acknowledge(request={"subscription": path, "ack_ids": ack_ids})
        structured_logger.debug(
            "Acknowledged messages", subscription=path, count=len(ack_ids)
        )

    def nack(self, subscription_name: str, ack_ids: Iterable[str]) -> None:
        """Release the leases on pulled messages so the next pull redelivers them."""
        ack_ids = list(ack_ids)
        if not ack_ids:
            return
        path = self._get_subscription_path(subscription_name)
        self._client.modify_ack_deadline(
            request={"subscription": path, "ack_ids": ack_ids, "ack_deadline_seconds": 0}
        )
        structured_logger.debug(
            "Released message leases", subscription=path, count=len(ack_ids)
        )

    def pull_and_ack(
        self,
        subscription_name: str,
        max_messages: Optional[int] = None,
        payload_match: Optional[Union[bytes, str]] = None,
    ) -> List[PulledMessage]:
        """
        Pull once and acknowledge the matching messages.

        Messages that do not match payload_match are left unacknowledged and
        are redelivered after the ack deadline. With payload_match=None every
        pulled message is acknowledged.

        Returns:
            The acknowledged messages
        """
        if isinstance(payload_match, str):
            payload_match = payload_match.encode("utf-8")

        pulled = self.pull(subscription_name, max_messages)
        matched = [
            message
            for message in pulled
            if payload_match is None or message.data == payload_match
        ]
        self.acknowledge(subscription_name, [message.ack_id for message in matched])
        return matched

    def multi_acknowledge(
        self,
        subscription_names: Sequence[str],
        payload_match: Optional[Union[bytes, str]] = None,
        max_messages: Optional[int] = None,
    ) -> Dict[str, List[PulledMessage]]:
        """
        Pull and acknowledge on each subscription independently.

        Each subscription is a separate consumer of its topic: acking on one
        never removes the message from another's backlog, so every
        subscription gets its own pull and its own acknowledge call.

        Returns:
            Mapping of subscription name to the messages acknowledged there
        """
        acknowledged = {}
        for subscription_name in subscription_names:
            acknowledged[subscription_name] = self.pull_and_ack(
                subscription_name, max_messages, payload_match
            )
        log_info(
            "Acknowledged messages across subscriptions",
            subscriptions=list(subscription_names),
            counts={name: len(msgs) for name, msgs in acknowledged.items()},
        )
        return acknowledged

    def subscribe(
        self,
        subscription_name: str,
        callback: Optional[Callable[[Message], None]] = None,
    ):
        """
        Open a streaming pull on a subscription.

        Each received message is logged, passed to callback (if any) and
        acknowledged once callback returns. A callback that raises gets the
        message nacked so the broker redelivers it.

        Returns:
            The StreamingPullFuture; cancel() it to stop receiving
        """
        path = self._get_subscription_path(subscription_name)

        def _handle(message):
            logger.info(
                f"Message received from {subscription_name} subscription: "
                f"{message.data.decode('utf-8', errors='replace')}"
            )
            if callback is not None:
                try:
                    callback(message)
                except Exception:
                    structured_logger.error(
                        "Subscriber callback failed, message left for redelivery",
                        subscription=path,
                        message_id=message.message_id,
                        exc_info=True,
                    )
                    message.nack()
                    return
            message.ack()

        log_info("Subscribing", subscription=path)
        return self._client.subscribe(path, callback=_handle)

"""
Google Cloud Pub/Sub publisher.
"""

import json
from typing import Any, Dict, List, Optional, Union
from google.api_core import exceptions
from google.cloud import pubsub_v1
from pydantic import BaseModel
from gcp_common.config import Config
from gcp_common.logging import get_logger, log_info, log_warning
from gcp_common.pubsub.clients import get_publisher_client, topic_path

logger = get_logger(__name__)

Payload = Union[bytes, str, Dict[str, Any], BaseModel]


class PubSubPublisher:
    """Publishes messages to topics of one project."""

    def __init__(
        self,
        project_id: str,
        client: Optional[pubsub_v1.PublisherClient] = None,
    ):
        if not project_id:
            raise ValueError("project_id must be provided to PubSubPublisher")
        self.project_id = project_id
        self._client = client or get_publisher_client()

    def _get_topic_path(self, topic_name: str) -> str:
        return topic_path(self.project_id, topic_name)

    def _encode(self, payload: Payload) -> bytes:
        """Encode a payload as message bytes.

        bytes pass through, str is UTF-8 encoded, pydantic models and dicts
        are serialized as JSON.
        """
        if isinstance(payload, bytes):
            return payload
        if isinstance(payload, str):
            return payload.encode("utf-8")
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(mode="json")
        return json.dumps(payload).encode("utf-8")

    def publish(
        self,
        topic_name: str,
        payload: Payload,
        count: int = 1,
        attributes: Optional[Dict[str, str]] = None,
    ) -> List[str]:
        """
        Publish count independent copies of payload to a topic.

        Every subscription bound to the topic receives its own copy of each
        message.

        Args:
            topic_name: Short or fully-qualified topic name
            payload: Message body
            count: Number of copies to publish (at least 1)
            attributes: Optional message attributes

        Returns:
            Message IDs in publish order

        Raises:
            ValueError: If count is less than 1
            NotFound: If the topic does not exist
        """
        if count < 1:
            raise ValueError(f"count must be at least 1, got {count}")

        path = self._get_topic_path(topic_name)
        data = self._encode(payload)
        futures = [
            self._client.publish(path, data, **(attributes or {}))
            for _ in range(count)
        ]

        message_ids = []
        for future in futures:
            try:
                message_ids.append(
                    future.result(timeout=Config.PUBSUB_PUBLISH_TIMEOUT_SECONDS)
                )
            except exceptions.NotFound:
                log_warning(
                    "Topic not found. Message not published.",
                    topic=path,
                )
                raise

        log_info("Published messages", topic=path, count=len(message_ids))
        return message_ids

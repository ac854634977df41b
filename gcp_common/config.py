"""
Configuration management for Google Cloud clients.
"""

import os
from typing import Optional


class Config:
    """Configuration class for client settings."""

    # Project Configuration
    GCP_PROJECT_ID: str = os.getenv("GCP_PROJECT_ID", "")
    GOOGLE_CLOUD_PROJECT: str = os.getenv(
        "GOOGLE_CLOUD_PROJECT", os.getenv("GCP_PROJECT_ID", "")
    )

    # Google Cloud Pub/Sub Configuration
    PUBSUB_EMULATOR_HOST: Optional[str] = os.getenv("PUBSUB_EMULATOR_HOST")
    PUBSUB_ACK_DEADLINE_SECONDS: int = int(
        os.getenv("PUBSUB_ACK_DEADLINE_SECONDS", "10")
    )
    PUBSUB_PULL_MAX_MESSAGES: int = int(os.getenv("PUBSUB_PULL_MAX_MESSAGES", "10"))
    PUBSUB_PUBLISH_TIMEOUT_SECONDS: float = float(
        os.getenv("PUBSUB_PUBLISH_TIMEOUT_SECONDS", "30")
    )

    # Bounded polling for eventually consistent reads (tests, cleanup)
    PUBSUB_CLIENT_TIMEOUT_SECONDS: float = float(
        os.getenv("PUBSUB_CLIENT_TIMEOUT_SECONDS", "60")
    )
    PUBSUB_POLL_INTERVAL_SECONDS: float = float(
        os.getenv("PUBSUB_POLL_INTERVAL_SECONDS", "0.5")
    )

    # Environment detection
    METADATA_PING_TIMEOUT_SECONDS: float = float(
        os.getenv("METADATA_PING_TIMEOUT_SECONDS", "1")
    )

    # Service Configuration
    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "unknown_service")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def get_project_id(cls) -> Optional[str]:
        """Get the configured GCP project ID.

        Checks, in order:
        1. GCP_PROJECT_ID
        2. GOOGLE_CLOUD_PROJECT
        3. GCP_PROJECT (legacy Cloud Functions runtime)

        The environment is re-read on every call so that tests and late
        configuration take effect.
        """
        for candidate in (
            os.getenv("GCP_PROJECT_ID") or cls.GCP_PROJECT_ID,
            os.getenv("GOOGLE_CLOUD_PROJECT") or cls.GOOGLE_CLOUD_PROJECT,
            os.getenv("GCP_PROJECT"),
        ):
            if candidate:
                return candidate
        return None

"""
Helpers for tests that run against live or emulated GCP services.
"""

from gcp_common.testing.polling import await_until

__all__ = ["await_until"]

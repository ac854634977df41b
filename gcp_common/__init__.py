"""
Shared Google Cloud utilities: Pub/Sub lifecycle and delivery, environment-gated
configuration and IAP audience resolution.
"""

__version__ = "0.1.0"

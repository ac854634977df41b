"""
Setup configuration for gcp_common package.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="gcp-common",
    version="0.1.0",
    author="gcp-common contributors",
    description="Pub/Sub lifecycle and delivery, environment-gated configuration and IAP audience helpers for Google Cloud",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.5.0",
        "google-cloud-pubsub>=2.18.0",
        "google-cloud-resource-manager>=1.10.0",
        "google-api-core>=2.11.0",
        "google-auth>=2.22.0,<3.0.0",  # compute_engine._metadata.ping is private API
        "requests>=2.31.0",  # google.auth.transport.requests for the metadata ping
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
)

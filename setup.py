"""Package setup for manage-api-sdk."""

from setuptools import setup

setup(
    name="manage-api-sdk",
    version="1.0.0",
    description="Typed Python client for the Keboola Manage API",
    packages=["manage_api_sdk"],
    python_requires=">=3.9",
    install_requires=[
        "httpx>=0.25.0",
        "pydantic>=2.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
)

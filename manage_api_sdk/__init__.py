"""Manage API Python SDK — typed client for the Keboola Manage API."""

from manage_api_sdk.client import ManageClient
from manage_api_sdk.async_client import AsyncManageClient
from manage_api_sdk.config import ClientConfig, load_config
from manage_api_sdk.errors import (
    AuthError,
    ClientError,
    ConfigError,
    ForbiddenError,
    MaintenanceError,
    ManageApiError,
    NotFoundError,
    ServerError,
    ValidationError,
)
from manage_api_sdk.models import (
    Backend,
    DeletedProjectsQuery,
    FeatureListOptions,
    ProjectRole,
    UndeleteProjectOptions,
)
from manage_api_sdk.snowflake import SnowflakeNameHelper

__version__ = "1.0.0"

__all__ = [
    "ManageClient",
    "AsyncManageClient",
    "ClientConfig",
    "load_config",
    "ManageApiError",
    "ConfigError",
    "ClientError",
    "AuthError",
    "ForbiddenError",
    "NotFoundError",
    "ValidationError",
    "ServerError",
    "MaintenanceError",
    "Backend",
    "ProjectRole",
    "DeletedProjectsQuery",
    "UndeleteProjectOptions",
    "FeatureListOptions",
    "SnowflakeNameHelper",
]

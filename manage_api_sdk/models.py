"""Typed request options and constants for the Manage API SDK.

Responses are returned as decoded JSON; only the query-string options
that the API accepts are modelled here.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


# ── Constants ───────────────────────────────────────────────────

class Backend(str, Enum):
    REDSHIFT = "redshift"
    SNOWFLAKE = "snowflake"
    SYNAPSE = "synapse"
    BIGQUERY = "bigquery"

    @classmethod
    def default(cls) -> "Backend":
        return cls.SNOWFLAKE


class ProjectRole(str, Enum):
    ADMIN = "admin"
    GUEST = "guest"
    READ_ONLY = "readOnly"
    SHARE = "share"
    PRODUCTION_MANAGER = "productionManager"
    DEVELOPER = "developer"
    REVIEWER = "reviewer"


# ── Query options ───────────────────────────────────────────────

class _QueryOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    def to_query(self) -> Dict[str, Any]:
        """Query-string parameters with camelCase names; unset fields omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)


class DeletedProjectsQuery(_QueryOptions):
    """Filters and paging for ``GET /manage/deleted-projects``."""

    limit: int = Field(default=100, ge=1)
    offset: int = Field(default=0, ge=0)
    organization_id: Optional[int] = Field(default=None, alias="organizationId")
    name: Optional[str] = None


class UndeleteProjectOptions(_QueryOptions):
    expiration_days: Optional[int] = Field(default=None, ge=1, alias="expirationDays")


class FeatureListOptions(_QueryOptions):
    type: Optional[str] = None

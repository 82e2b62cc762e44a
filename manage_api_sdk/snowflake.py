"""Names of Snowflake objects the Manage API creates for a registered backend."""

from __future__ import annotations


class SnowflakeNameHelper:
    """Derive object names from a backend's (upper-cased) prefix."""

    NETWORK_RULES_SCHEMA = "NETWORK_RULES"

    def __init__(self, prefix: str) -> None:
        self._prefix = prefix.upper()

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def internal_database_name(self) -> str:
        return f"{self._prefix}_INTERNAL"

    @property
    def network_rules_schema_name(self) -> str:
        return self.NETWORK_RULES_SCHEMA

    @property
    def network_rule_name(self) -> str:
        return f"{self._prefix}_NETWORK_RULE"

    @property
    def system_ips_only_policy_name(self) -> str:
        return f"{self._prefix}_SYSTEM_IPS_ONLY"

    @property
    def saml_integration_name(self) -> str:
        return f"{self._prefix}_SAML_INTEGRATION"

    @staticmethod
    def user_role_name(username: str) -> str:
        return f"{username}_ROLE"

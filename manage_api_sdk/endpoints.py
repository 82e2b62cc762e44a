"""Manage API endpoint methods, shared by the sync and async clients.

Every method builds a path, picks the verb and hands the JSON body to the
client's request helpers. The helpers decide whether the call blocks
(:class:`~manage_api_sdk.client.ManageClient`) or returns an awaitable
(:class:`~manage_api_sdk.async_client.AsyncManageClient`), so each method
here simply returns what the helper gives back.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Type, TypeVar, Union

from manage_api_sdk.models import (
    DeletedProjectsQuery,
    FeatureListOptions,
    UndeleteProjectOptions,
    _QueryOptions,
)
from manage_api_sdk.utils import encode_path

Id = Union[int, str]
Q = TypeVar("Q", bound=_QueryOptions)


def _query(cls: Type[Q], options: Union[Q, Mapping[str, Any], None]) -> Dict[str, Any]:
    if options is None:
        return cls().to_query()
    if isinstance(options, cls):
        return options.to_query()
    return cls.model_validate(dict(options)).to_query()


class ManageEndpoints:
    """Mixin with one method per Manage API endpoint.

    Subclasses provide ``_request(method, path, json=None, params=None)``
    and ``_discard(result)``.
    """

    # ── Request helpers ──────────────────────────────────────────

    def _request(self, method: str, path: str, json: Any = None, params: Optional[Dict[str, Any]] = None) -> Any:
        raise NotImplementedError

    def _discard(self, result: Any) -> Any:
        raise NotImplementedError

    def _api_get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self._request("GET", path, params=params)

    def _api_post(self, path: str, data: Optional[Mapping[str, Any]] = None) -> Any:
        return self._request("POST", path, json=dict(data or {}))

    def _api_put(self, path: str, data: Mapping[str, Any]) -> Any:
        return self._request("PUT", path, json=dict(data))

    def _api_patch(self, path: str, data: Mapping[str, Any]) -> Any:
        return self._request("PATCH", path, json=dict(data))

    def _api_delete(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self._discard(self._request("DELETE", path, params=params))

    # ── Tokens ───────────────────────────────────────────────────

    def verify_token(self) -> Any:
        """GET /manage/tokens/verify"""
        return self._api_get("/manage/tokens/verify")

    def create_session_token(self) -> Any:
        """POST /manage/current-user/session-token"""
        return self._api_post("/manage/current-user/session-token")

    # ── Maintainers ──────────────────────────────────────────────

    def list_maintainers(self) -> Any:
        """GET /manage/maintainers"""
        return self._api_get("/manage/maintainers")

    def create_maintainer(self, params: Mapping[str, Any]) -> Any:
        """POST /manage/maintainers"""
        return self._api_post("/manage/maintainers", params)

    def update_maintainer(self, maintainer_id: Id, params: Optional[Mapping[str, Any]] = None) -> Any:
        """PATCH /manage/maintainers/{id}"""
        return self._api_patch(encode_path("/manage/maintainers/%s", maintainer_id), params or {})

    def delete_maintainer(self, maintainer_id: Id) -> Any:
        """DELETE /manage/maintainers/{id}"""
        return self._api_delete(encode_path("/manage/maintainers/%s", maintainer_id))

    def get_maintainer(self, maintainer_id: Id) -> Any:
        """GET /manage/maintainers/{id}"""
        return self._api_get(encode_path("/manage/maintainers/%s", maintainer_id))

    def list_maintainer_members(self, maintainer_id: Id) -> Any:
        """GET /manage/maintainers/{id}/users"""
        return self._api_get(encode_path("/manage/maintainers/%s/users", maintainer_id))

    def add_user_to_maintainer(self, maintainer_id: Id, params: Optional[Mapping[str, Any]] = None) -> Any:
        """POST /manage/maintainers/{id}/users"""
        return self._api_post(encode_path("/manage/maintainers/%s/users", maintainer_id), params)

    def remove_user_from_maintainer(self, maintainer_id: Id, user_id: Id) -> Any:
        """DELETE /manage/maintainers/{id}/users/{userId}"""
        return self._api_delete(encode_path("/manage/maintainers/%s/users/%s", maintainer_id, user_id))

    def invite_user_to_maintainer(self, maintainer_id: Id, params: Optional[Mapping[str, Any]] = None) -> Any:
        """POST /manage/maintainers/{id}/invitations"""
        return self._api_post(encode_path("/manage/maintainers/%s/invitations", maintainer_id), params)

    def list_maintainer_invitations(self, maintainer_id: Id) -> Any:
        """GET /manage/maintainers/{id}/invitations"""
        return self._api_get(encode_path("/manage/maintainers/%s/invitations", maintainer_id))

    def get_maintainer_invitation(self, maintainer_id: Id, invitation_id: Id) -> Any:
        """GET /manage/maintainers/{id}/invitations/{invitationId}"""
        return self._api_get(
            encode_path("/manage/maintainers/%s/invitations/%s", maintainer_id, invitation_id)
        )

    def cancel_maintainer_invitation(self, maintainer_id: Id, invitation_id: Id) -> Any:
        """DELETE /manage/maintainers/{id}/invitations/{invitationId}"""
        return self._api_delete(
            encode_path("/manage/maintainers/%s/invitations/%s", maintainer_id, invitation_id)
        )

    def list_my_maintainer_invitations(self) -> Any:
        """GET /manage/current-user/maintainers-invitations"""
        return self._api_get("/manage/current-user/maintainers-invitations")

    def accept_my_maintainer_invitation(self, invitation_id: Id) -> Any:
        """PUT /manage/current-user/maintainers-invitations/{id}"""
        return self._discard(
            self._api_put(encode_path("/manage/current-user/maintainers-invitations/%s", invitation_id), {})
        )

    def get_my_maintainer_invitation(self, invitation_id: Id) -> Any:
        """GET /manage/current-user/maintainers-invitations/{id}"""
        return self._api_get(encode_path("/manage/current-user/maintainers-invitations/%s", invitation_id))

    def decline_my_maintainer_invitation(self, invitation_id: Id) -> Any:
        """DELETE /manage/current-user/maintainers-invitations/{id}"""
        return self._api_delete(encode_path("/manage/current-user/maintainers-invitations/%s", invitation_id))

    def join_maintainer(self, maintainer_id: Id) -> Any:
        """POST /manage/maintainers/{id}/join-maintainer"""
        return self._discard(self._api_post(encode_path("/manage/maintainers/%s/join-maintainer", maintainer_id)))

    def list_maintainer_organizations(self, maintainer_id: Id) -> Any:
        """GET /manage/maintainers/{id}/organizations"""
        return self._api_get(encode_path("/manage/maintainers/%s/organizations", maintainer_id))

    def set_maintainer_metadata(self, maintainer_id: Id, provider: str, metadata: Any) -> Any:
        """POST /manage/maintainers/{id}/metadata"""
        return self._api_post(
            encode_path("/manage/maintainers/%s/metadata", maintainer_id),
            {"provider": provider, "metadata": metadata},
        )

    def list_maintainer_metadata(self, maintainer_id: Id) -> Any:
        """GET /manage/maintainers/{id}/metadata"""
        return self._api_get(encode_path("/manage/maintainers/%s/metadata", maintainer_id))

    def delete_maintainer_metadata(self, maintainer_id: Id, metadata_id: Id) -> Any:
        """DELETE /manage/maintainers/{id}/metadata/{metadataId}"""
        return self._api_delete(encode_path("/manage/maintainers/%s/metadata/%s", maintainer_id, metadata_id))

    def list_promo_codes(self, maintainer_id: Id) -> Any:
        """GET /manage/maintainers/{id}/promo-codes"""
        return self._api_get(encode_path("/manage/maintainers/%s/promo-codes", maintainer_id))

    def create_promo_code(self, maintainer_id: Id, params: Optional[Mapping[str, Any]] = None) -> Any:
        """POST /manage/maintainers/{id}/promo-codes/"""
        return self._api_post(encode_path("/manage/maintainers/%s/promo-codes/", maintainer_id), params)

    # ── Organizations ────────────────────────────────────────────

    def list_organizations(self) -> Any:
        """GET /manage/organizations"""
        return self._api_get("/manage/organizations")

    def list_organization_projects(self, organization_id: Id) -> Any:
        """GET /manage/organizations/{id}/projects"""
        return self._api_get(encode_path("/manage/organizations/%s/projects", organization_id))

    def create_organization(self, maintainer_id: Id, params: Mapping[str, Any]) -> Any:
        """POST /manage/maintainers/{maintainerId}/organizations"""
        return self._api_post(encode_path("/manage/maintainers/%s/organizations", maintainer_id), params)

    def get_organization(self, organization_id: Id) -> Any:
        """GET /manage/organizations/{id}"""
        return self._api_get(encode_path("/manage/organizations/%s", organization_id))

    def update_organization(self, organization_id: Id, params: Mapping[str, Any]) -> Any:
        """PATCH /manage/organizations/{id}"""
        return self._api_patch(encode_path("/manage/organizations/%s", organization_id), params)

    def enable_organization_mfa(self, organization_id: Id) -> Any:
        """PATCH /manage/organizations/{id}/force-mfa"""
        return self._api_patch(encode_path("/manage/organizations/%s/force-mfa", organization_id), {})

    def delete_organization(self, organization_id: Id) -> Any:
        """DELETE /manage/organizations/{id}"""
        return self._api_delete(encode_path("/manage/organizations/%s", organization_id))

    def list_organization_users(self, organization_id: Id) -> Any:
        """GET /manage/organizations/{id}/users"""
        return self._api_get(encode_path("/manage/organizations/%s/users", organization_id))

    def list_organization_projects_users(self, organization_id: Id) -> Any:
        """GET /manage/organizations/{id}/projects-users"""
        return self._api_get(encode_path("/manage/organizations/%s/projects-users", organization_id))

    def add_user_to_organization(self, organization_id: Id, params: Optional[Mapping[str, Any]] = None) -> Any:
        """POST /manage/organizations/{id}/users"""
        return self._api_post(encode_path("/manage/organizations/%s/users", organization_id), params)

    def remove_user_from_organization(self, organization_id: Id, user_id: Id) -> Any:
        """DELETE /manage/organizations/{id}/users/{userId}"""
        return self._api_delete(encode_path("/manage/organizations/%s/users/%s", organization_id, user_id))

    def invite_user_to_organization(self, organization_id: Id, params: Optional[Mapping[str, Any]] = None) -> Any:
        """POST /manage/organizations/{id}/invitations"""
        return self._api_post(encode_path("/manage/organizations/%s/invitations", organization_id), params)

    def list_organization_invitations(self, organization_id: Id) -> Any:
        """GET /manage/organizations/{id}/invitations"""
        return self._api_get(encode_path("/manage/organizations/%s/invitations", organization_id))

    def get_organization_invitation(self, organization_id: Id, invitation_id: Id) -> Any:
        """GET /manage/organizations/{id}/invitations/{invitationId}"""
        return self._api_get(
            encode_path("/manage/organizations/%s/invitations/%s", organization_id, invitation_id)
        )

    def cancel_organization_invitation(self, organization_id: Id, invitation_id: Id) -> Any:
        """DELETE /manage/organizations/{id}/invitations/{invitationId}"""
        return self._api_delete(
            encode_path("/manage/organizations/%s/invitations/%s", organization_id, invitation_id)
        )

    def list_my_organization_invitations(self) -> Any:
        """GET /manage/current-user/organizations-invitations"""
        return self._api_get("/manage/current-user/organizations-invitations")

    def accept_my_organization_invitation(self, invitation_id: Id) -> Any:
        """PUT /manage/current-user/organizations-invitations/{id}"""
        return self._discard(
            self._api_put(encode_path("/manage/current-user/organizations-invitations/%s", invitation_id), {})
        )

    def get_my_organization_invitation(self, invitation_id: Id) -> Any:
        """GET /manage/current-user/organizations-invitations/{id}"""
        return self._api_get(encode_path("/manage/current-user/organizations-invitations/%s", invitation_id))

    def decline_my_organization_invitation(self, invitation_id: Id) -> Any:
        """DELETE /manage/current-user/organizations-invitations/{id}"""
        return self._api_delete(encode_path("/manage/current-user/organizations-invitations/%s", invitation_id))

    def join_organization(self, organization_id: Id) -> Any:
        """POST /manage/organizations/{id}/join-organization"""
        return self._discard(
            self._api_post(encode_path("/manage/organizations/%s/join-organization", organization_id))
        )

    def set_organization_metadata(self, organization_id: Id, provider: str, metadata: Any) -> Any:
        """POST /manage/organizations/{id}/metadata"""
        return self._api_post(
            encode_path("/manage/organizations/%s/metadata", organization_id),
            {"provider": provider, "metadata": metadata},
        )

    def list_organization_metadata(self, organization_id: Id) -> Any:
        """GET /manage/organizations/{id}/metadata"""
        return self._api_get(encode_path("/manage/organizations/%s/metadata", organization_id))

    def delete_organization_metadata(self, organization_id: Id, metadata_id: Id) -> Any:
        """DELETE /manage/organizations/{id}/metadata/{metadataId}"""
        return self._api_delete(
            encode_path("/manage/organizations/%s/metadata/%s", organization_id, metadata_id)
        )

    # ── Projects ─────────────────────────────────────────────────

    def create_project(self, organization_id: Id, params: Mapping[str, Any]) -> Any:
        """POST /manage/organizations/{organizationId}/projects"""
        return self._api_post(encode_path("/manage/organizations/%s/projects", organization_id), params)

    def update_project(self, project_id: Id, params: Mapping[str, Any]) -> Any:
        """PUT /manage/projects/{id}"""
        return self._api_put(encode_path("/manage/projects/%s", project_id), params)

    def get_project(self, project_id: Id) -> Any:
        """GET /manage/projects/{id}"""
        return self._api_get(encode_path("/manage/projects/%s", project_id))

    def delete_project(self, project_id: Id) -> Any:
        """DELETE /manage/projects/{id}"""
        return self._api_delete(encode_path("/manage/projects/%s", project_id))

    def undelete_project(
        self,
        project_id: Id,
        options: Union[UndeleteProjectOptions, Mapping[str, Any], None] = None,
    ) -> Any:
        """DELETE /manage/deleted-projects/{id} — restores a deleted project."""
        return self._api_delete(
            encode_path("/manage/deleted-projects/%s", project_id),
            params=_query(UndeleteProjectOptions, options),
        )

    def list_deleted_projects(
        self,
        options: Union[DeletedProjectsQuery, Mapping[str, Any], None] = None,
    ) -> Any:
        """GET /manage/deleted-projects (defaults: limit=100, offset=0)"""
        return self._api_get("/manage/deleted-projects", params=_query(DeletedProjectsQuery, options))

    def get_deleted_project(self, project_id: Id) -> Any:
        """GET /manage/deleted-projects/{id}"""
        return self._api_get(encode_path("/manage/deleted-projects/%s", project_id))

    def purge_deleted_project(self, project_id: Id, params: Optional[Mapping[str, Any]] = None) -> Any:
        """POST /manage/deleted-projects/{id}/purge"""
        return self._api_post(encode_path("/manage/deleted-projects/%s/purge", project_id), params)

    def list_project_users(self, project_id: Id) -> Any:
        """GET /manage/projects/{id}/users"""
        return self._api_get(encode_path("/manage/projects/%s/users", project_id))

    def list_project_invitations(self, project_id: Id) -> Any:
        """GET /manage/projects/{id}/invitations"""
        return self._api_get(encode_path("/manage/projects/%s/invitations", project_id))

    def list_my_project_invitations(self) -> Any:
        """GET /manage/current-user/projects-invitations"""
        return self._api_get("/manage/current-user/projects-invitations")

    def accept_my_project_invitation(self, invitation_id: Id) -> Any:
        """PUT /manage/current-user/projects-invitations/{id}"""
        return self._discard(
            self._api_put(encode_path("/manage/current-user/projects-invitations/%s", invitation_id), {})
        )

    def get_my_project_invitation(self, invitation_id: Id) -> Any:
        """GET /manage/current-user/projects-invitations/{id}"""
        return self._api_get(encode_path("/manage/current-user/projects-invitations/%s", invitation_id))

    def decline_my_project_invitation(self, invitation_id: Id) -> Any:
        """DELETE /manage/current-user/projects-invitations/{id}"""
        return self._api_delete(encode_path("/manage/current-user/projects-invitations/%s", invitation_id))

    def add_user_to_project(self, project_id: Id, params: Optional[Mapping[str, Any]] = None) -> Any:
        """POST /manage/projects/{id}/users"""
        return self._api_post(encode_path("/manage/projects/%s/users", project_id), params)

    def invite_user_to_project(self, project_id: Id, params: Optional[Mapping[str, Any]] = None) -> Any:
        """POST /manage/projects/{id}/invitations"""
        return self._api_post(encode_path("/manage/projects/%s/invitations", project_id), params)

    def remove_user_from_project(self, project_id: Id, user_id: Id) -> Any:
        """DELETE /manage/projects/{id}/users/{userId}"""
        return self._api_delete(encode_path("/manage/projects/%s/users/%s", project_id, user_id))

    def update_user_project_membership(self, project_id: Id, user_id: Id, params: Mapping[str, Any]) -> Any:
        """PATCH /manage/projects/{id}/users/{userId}"""
        return self._api_patch(encode_path("/manage/projects/%s/users/%s", project_id, user_id), params)

    def get_project_invitation(self, project_id: Id, invitation_id: Id) -> Any:
        """GET /manage/projects/{id}/invitations/{invitationId}"""
        return self._api_get(encode_path("/manage/projects/%s/invitations/%s", project_id, invitation_id))

    def cancel_project_invitation(self, project_id: Id, invitation_id: Id) -> Any:
        """DELETE /manage/projects/{id}/invitations/{invitationId}"""
        return self._api_delete(encode_path("/manage/projects/%s/invitations/%s", project_id, invitation_id))

    def enable_project(self, project_id: Id) -> Any:
        """POST /manage/projects/{id}/disabled with isDisabled=false"""
        return self._discard(
            self._api_post(encode_path("/manage/projects/%s/disabled", project_id), {"isDisabled": False})
        )

    def disable_project(self, project_id: Id, params: Optional[Mapping[str, Any]] = None) -> Any:
        """POST /manage/projects/{id}/disabled with isDisabled=true"""
        body: Dict[str, Any] = dict(params or {})
        body["isDisabled"] = True
        return self._discard(self._api_post(encode_path("/manage/projects/%s/disabled", project_id), body))

    def create_project_storage_token(self, project_id: Id, params: Mapping[str, Any]) -> Any:
        """POST /manage/projects/{id}/tokens"""
        return self._api_post(encode_path("/manage/projects/%s/tokens", project_id), params)

    def give_project_credits(self, project_id: Id, params: Optional[Mapping[str, Any]] = None) -> Any:
        """POST /manage/projects/{id}/credits"""
        return self._api_post(encode_path("/manage/projects/%s/credits", project_id), params)

    def assign_project_storage_backend(self, project_id: Id, backend_id: int) -> Any:
        """POST /manage/projects/{id}/storage-backend"""
        return self._api_post(
            encode_path("/manage/projects/%s/storage-backend", project_id),
            {"storageBackendId": int(backend_id)},
        )

    def remove_project_storage_backend(self, project_id: Id, backend_id: Id) -> Any:
        """DELETE /manage/projects/{id}/storage-backend/{backendId}"""
        return self._api_delete(encode_path("/manage/projects/%s/storage-backend/%s", project_id, backend_id))

    def assign_file_storage(self, project_id: Id, storage_id: int) -> Any:
        """POST /manage/projects/{id}/file-storage"""
        return self._api_post(
            encode_path("/manage/projects/%s/file-storage", project_id),
            {"fileStorageId": int(storage_id)},
        )

    def change_project_organization(self, project_id: Id, organization_id: Id) -> Any:
        """POST /manage/projects/{id}/organizations"""
        return self._api_post(
            encode_path("/manage/projects/%s/organizations", project_id),
            {"organizationId": organization_id},
        )

    def set_project_limits(self, project_id: Id, limits: Any) -> Any:
        """POST /manage/projects/{id}/limits"""
        return self._api_post(encode_path("/manage/projects/%s/limits", project_id), {"limits": limits})

    def remove_project_limit(self, project_id: Id, limit_name: str) -> Any:
        """DELETE /manage/projects/{id}/limits/{limitName}"""
        return self._api_delete(encode_path("/manage/projects/%s/limits/%s", project_id, limit_name))

    def set_project_metadata(self, project_id: Id, provider: str, metadata: Any) -> Any:
        """POST /manage/projects/{id}/metadata"""
        return self._api_post(
            encode_path("/manage/projects/%s/metadata", project_id),
            {"provider": provider, "metadata": metadata},
        )

    def list_project_metadata(self, project_id: Id) -> Any:
        """GET /manage/projects/{id}/metadata"""
        return self._api_get(encode_path("/manage/projects/%s/metadata", project_id))

    def delete_project_metadata(self, project_id: Id, metadata_id: Id) -> Any:
        """DELETE /manage/projects/{id}/metadata/{metadataId}"""
        return self._api_delete(encode_path("/manage/projects/%s/metadata/%s", project_id, metadata_id))

    def add_project_feature(self, project_id: Id, feature: str) -> Any:
        """POST /manage/projects/{id}/features"""
        return self._api_post(encode_path("/manage/projects/%s/features", project_id), {"feature": feature})

    def remove_project_feature(self, project_id: Id, feature: str) -> Any:
        """DELETE /manage/projects/{id}/features/{feature}"""
        return self._api_delete(encode_path("/manage/projects/%s/features/%s", project_id, feature))

    # ── Project join requests ────────────────────────────────────

    def list_my_project_join_requests(self) -> Any:
        """GET /manage/current-user/projects-join-requests"""
        return self._api_get("/manage/current-user/projects-join-requests")

    def get_my_project_join_request(self, join_request_id: Id) -> Any:
        """GET /manage/current-user/projects-join-requests/{id}"""
        return self._api_get(encode_path("/manage/current-user/projects-join-requests/%s", join_request_id))

    def request_access_to_project(self, project_id: Id, params: Optional[Mapping[str, Any]] = None) -> Any:
        """POST /manage/projects/{id}/request-access"""
        return self._api_post(encode_path("/manage/projects/%s/request-access", project_id), params)

    def join_project(self, project_id: Id) -> Any:
        """POST /manage/projects/{id}/join-project"""
        return self._discard(self._api_post(encode_path("/manage/projects/%s/join-project", project_id)))

    def delete_my_project_join_request(self, join_request_id: Id) -> Any:
        """DELETE /manage/current-user/projects-join-requests/{id}"""
        return self._api_delete(encode_path("/manage/current-user/projects-join-requests/%s", join_request_id))

    def approve_my_project_join_request(self, join_request_id: Id) -> Any:
        """PUT /manage/current-user/projects-join-requests/{id}"""
        return self._discard(
            self._api_put(encode_path("/manage/current-user/projects-join-requests/%s", join_request_id), {})
        )

    def list_project_join_requests(self, project_id: Id) -> Any:
        """GET /manage/projects/{id}/join-requests"""
        return self._api_get(encode_path("/manage/projects/%s/join-requests", project_id))

    def get_project_join_request(self, project_id: Id, join_request_id: Id) -> Any:
        """GET /manage/projects/{id}/join-requests/{joinRequestId}"""
        return self._api_get(encode_path("/manage/projects/%s/join-requests/%s", project_id, join_request_id))

    def approve_project_join_request(self, project_id: Id, join_request_id: Id) -> Any:
        """PUT /manage/projects/{id}/join-requests/{joinRequestId}"""
        return self._discard(
            self._api_put(encode_path("/manage/projects/%s/join-requests/%s", project_id, join_request_id), {})
        )

    def reject_project_join_request(self, project_id: Id, join_request_id: Id) -> Any:
        """DELETE /manage/projects/{id}/join-requests/{joinRequestId}"""
        return self._api_delete(encode_path("/manage/projects/%s/join-requests/%s", project_id, join_request_id))

    # ── Features ─────────────────────────────────────────────────

    def create_feature(
        self,
        name: str,
        type: str,
        title: str,
        description: str,
        can_be_managed_by_admin: bool = False,
        can_be_managed_via_api: bool = True,
    ) -> Any:
        """POST /manage/features"""
        return self._api_post(
            "/manage/features",
            {
                "name": name,
                "type": type,
                "title": title,
                "description": description,
                "canBeManageByAdmin": can_be_managed_by_admin,
                "canBeManagedViaAPI": can_be_managed_via_api,
            },
        )

    def update_feature(self, feature_id: Id, options: Optional[Mapping[str, Any]] = None) -> Any:
        """PATCH /manage/features/{id}"""
        return self._api_patch(encode_path("/manage/features/%s", feature_id), options or {})

    def remove_feature(self, feature_id: Id) -> Any:
        """DELETE /manage/features/{id}"""
        return self._api_delete(encode_path("/manage/features/%s", feature_id))

    def list_features(self, options: Union[FeatureListOptions, Mapping[str, Any], None] = None) -> Any:
        """GET /manage/features, optionally filtered by type."""
        return self._api_get("/manage/features", params=_query(FeatureListOptions, options) or None)

    def get_feature(self, feature_id: Id) -> Any:
        """GET /manage/features/{id}"""
        return self._api_get(encode_path("/manage/features/%s", feature_id))

    def get_feature_projects(self, feature_id: Id) -> Any:
        """GET /manage/features/{id}/projects"""
        return self._api_get(encode_path("/manage/features/%s/projects", feature_id))

    def get_feature_admins(self, feature_id: Id) -> Any:
        """GET /manage/features/{id}/admins"""
        return self._api_get(encode_path("/manage/features/%s/admins", feature_id))

    # ── Users ────────────────────────────────────────────────────

    def get_user(self, email_or_id: Id) -> Any:
        """GET /manage/users/{emailOrId}"""
        return self._api_get(encode_path("/manage/users/%s", email_or_id))

    def update_user(self, email_or_id: Id, params: Mapping[str, Any]) -> Any:
        """PUT /manage/users/{emailOrId}"""
        return self._api_put(encode_path("/manage/users/%s", email_or_id), params)

    def remove_user(self, user_id: Id) -> Any:
        """DELETE /manage/users/{id}"""
        return self._api_delete(encode_path("/manage/users/%s", user_id))

    def add_user_feature(self, email_or_id: Id, feature: str) -> Any:
        """POST /manage/users/{emailOrId}/features"""
        return self._api_post(encode_path("/manage/users/%s/features", email_or_id), {"feature": feature})

    def remove_user_feature(self, email_or_id: Id, feature: str) -> Any:
        """DELETE /manage/users/{emailOrId}/features/{feature}"""
        return self._api_delete(encode_path("/manage/users/%s/features/%s", email_or_id, feature))

    def set_user_metadata(self, email_or_id: Id, provider: str, metadata: Any) -> Any:
        """POST /manage/users/{emailOrId}/metadata"""
        return self._api_post(
            encode_path("/manage/users/%s/metadata", email_or_id),
            {"provider": provider, "metadata": metadata},
        )

    def list_user_metadata(self, email_or_id: Id) -> Any:
        """GET /manage/users/{emailOrId}/metadata"""
        return self._api_get(encode_path("/manage/users/%s/metadata", email_or_id))

    def delete_user_metadata(self, email_or_id: Id, metadata_id: Id) -> Any:
        """DELETE /manage/users/{emailOrId}/metadata/{metadataId}"""
        return self._api_delete(encode_path("/manage/users/%s/metadata/%s", email_or_id, metadata_id))

    def disable_user_mfa(self, email_or_id: Id) -> Any:
        """DELETE /manage/users/{emailOrId}/mfa"""
        return self._api_delete(encode_path("/manage/users/%s/mfa", email_or_id))

    # ── Project templates & promo codes ──────────────────────────

    def get_project_template(self, template_id: str) -> Any:
        """GET /manage/project-templates/{id}"""
        return self._api_get(encode_path("/manage/project-templates/%s", template_id))

    def get_project_templates(self) -> Any:
        """GET /manage/project-templates"""
        return self._api_get("/manage/project-templates")

    def get_project_template_features(self, template_id: str) -> Any:
        """GET /manage/project-templates/{id}/features"""
        return self._api_get(encode_path("/manage/project-templates/%s/features", template_id))

    def add_project_template_feature(self, template_id: str, feature_name: str) -> Any:
        """POST /manage/project-templates/{id}/features"""
        return self._api_post(
            encode_path("/manage/project-templates/%s/features", template_id),
            {"feature": feature_name},
        )

    def remove_project_template_feature(self, template_id: str, feature_name: str) -> Any:
        """DELETE /manage/project-templates/{id}/features/{feature}"""
        return self._api_delete(
            encode_path("/manage/project-templates/%s/features/%s", template_id, feature_name)
        )

    def create_project_from_promo_code(self, promo_code: str) -> Any:
        """POST /manage/current-user/promo-codes"""
        return self._api_post("/manage/current-user/promo-codes", {"code": promo_code})

    def list_used_promo_codes(self) -> Any:
        """GET /manage/current-user/promo-codes"""
        return self._api_get("/manage/current-user/promo-codes")

    # ── File storage ─────────────────────────────────────────────

    def create_s3_file_storage(self, options: Mapping[str, Any]) -> Any:
        """POST /manage/file-storage-s3/"""
        return self._api_post("/manage/file-storage-s3/", options)

    def set_s3_file_storage_as_default(self, file_storage_id: Id) -> Any:
        """POST /manage/file-storage-s3/{id}/default"""
        return self._api_post(encode_path("/manage/file-storage-s3/%s/default", file_storage_id))

    def list_s3_file_storage(self) -> Any:
        """GET /manage/file-storage-s3"""
        return self._api_get("/manage/file-storage-s3")

    def rotate_s3_file_storage_credentials(self, file_storage_id: Id, options: Mapping[str, Any]) -> Any:
        """POST /manage/file-storage-s3/{id}/credentials"""
        return self._api_post(encode_path("/manage/file-storage-s3/%s/credentials", file_storage_id), options)

    def create_abs_file_storage(self, options: Mapping[str, Any]) -> Any:
        """POST /manage/file-storage-abs/"""
        return self._api_post("/manage/file-storage-abs/", options)

    def set_abs_file_storage_as_default(self, file_storage_id: Id) -> Any:
        """POST /manage/file-storage-abs/{id}/default"""
        return self._api_post(encode_path("/manage/file-storage-abs/%s/default", file_storage_id))

    def list_abs_file_storage(self) -> Any:
        """GET /manage/file-storage-abs/"""
        return self._api_get("/manage/file-storage-abs/")

    def rotate_abs_file_storage_credentials(self, file_storage_id: Id, options: Mapping[str, Any]) -> Any:
        """POST /manage/file-storage-abs/{id}/credentials"""
        return self._api_post(encode_path("/manage/file-storage-abs/%s/credentials", file_storage_id), options)

    def create_gcs_file_storage(self, options: Mapping[str, Any]) -> Any:
        """POST /manage/file-storage-gcs/"""
        return self._api_post("/manage/file-storage-gcs/", options)

    def set_gcs_file_storage_as_default(self, file_storage_id: Id) -> Any:
        """POST /manage/file-storage-gcs/{id}/default"""
        return self._api_post(encode_path("/manage/file-storage-gcs/%s/default", file_storage_id))

    def list_gcs_file_storage(self) -> Any:
        """GET /manage/file-storage-gcs/"""
        return self._api_get("/manage/file-storage-gcs/")

    def rotate_gcs_file_storage_credentials(self, file_storage_id: Id, options: Mapping[str, Any]) -> Any:
        """POST /manage/file-storage-gcs/{id}/credentials"""
        return self._api_post(encode_path("/manage/file-storage-gcs/%s/credentials", file_storage_id), options)

    # ── Storage backends ─────────────────────────────────────────

    def create_storage_backend(self, options: Mapping[str, Any]) -> Any:
        """POST /manage/storage-backend"""
        return self._api_post("/manage/storage-backend", options)

    def update_storage_backend(self, storage_backend_id: Id, options: Mapping[str, Any]) -> Any:
        """PATCH /manage/storage-backend/{id}"""
        return self._api_patch(encode_path("/manage/storage-backend/%s", storage_backend_id), options)

    def create_storage_backend_bigquery(self, options: Mapping[str, Any]) -> Any:
        """POST /manage/storage-backend/bigquery"""
        return self._api_post("/manage/storage-backend/bigquery", options)

    def update_storage_backend_bigquery(self, storage_backend_id: Id, options: Mapping[str, Any]) -> Any:
        """PATCH /manage/storage-backend/{id}/bigquery"""
        return self._api_patch(encode_path("/manage/storage-backend/%s/bigquery", storage_backend_id), options)

    def create_snowflake_storage_backend(self, options: Mapping[str, Any]) -> Any:
        """POST /manage/storage-backend/snowflake"""
        return self._api_post("/manage/storage-backend/snowflake", options)

    def remove_storage_backend(self, storage_backend_id: Id) -> Any:
        """DELETE /manage/storage-backend/{id}"""
        return self._api_delete(encode_path("/manage/storage-backend/%s", storage_backend_id))

    def list_storage_backend(self) -> Any:
        """GET /manage/storage-backend"""
        return self._api_get("/manage/storage-backend")

    def get_storage_backend(self, storage_backend_id: Id) -> Any:
        """GET /manage/storage-backend/{id}"""
        return self._api_get(encode_path("/manage/storage-backend/%s", storage_backend_id))

    def activate_storage_backend(self, storage_backend_id: Id) -> Any:
        """POST /manage/storage-backend/{id}/activate"""
        return self._api_post(encode_path("/manage/storage-backend/%s/activate", storage_backend_id), {})

    # ── UI apps, commands, notifications ─────────────────────────

    def list_ui_apps(self) -> Any:
        """GET /manage/ui-apps"""
        return self._api_get("/manage/ui-apps")

    def register_ui_app(self, options: Mapping[str, Any]) -> Any:
        """POST /manage/ui-apps"""
        return self._api_post("/manage/ui-apps", options)

    def delete_ui_app(self, name: str) -> Any:
        """DELETE /manage/ui-apps/{name}"""
        return self._api_delete(encode_path("/manage/ui-apps/%s", name))

    def run_command(self, options: Mapping[str, Any]) -> Any:
        """POST /manage/commands"""
        return self._api_post("/manage/commands", options)

    def add_notification(self, params: Mapping[str, Any]) -> Any:
        """POST /manage/notifications"""
        return self._api_post("/manage/notifications", params)

    def get_notifications(self) -> Any:
        """GET /manage/notifications"""
        return self._api_get("/manage/notifications")

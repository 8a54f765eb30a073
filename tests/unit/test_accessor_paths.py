"""
Unit tests for the Admin API path templates of every accessor.

Each case calls one accessor method against the mock transport and checks
the HTTP verb and path it produced.
"""

import json

import pytest

ROLE = {"id": "r1", "name": "viewer"}

PATH_CASES = [
    # Users
    ("users", "find", (), {}, "GET", "/admin/realms/master/users"),
    ("users", "count", (), {}, "GET", "/admin/realms/master/users/count"),
    ("users", "update", ("u1", {"enabled": False}), {}, "PUT", "/admin/realms/master/users/u1"),
    ("users", "list_role_mappings", ("u1",), {}, "GET", "/admin/realms/master/users/u1/role-mappings"),
    ("users", "add_realm_role_mappings", ("u1", [ROLE]), {}, "POST", "/admin/realms/master/users/u1/role-mappings/realm"),
    ("users", "list_available_client_role_mappings", ("u1", "c1"), {}, "GET", "/admin/realms/master/users/u1/role-mappings/clients/c1/available"),
    ("users", "reset_password", ("u1", {"type": "password", "value": "pw"}), {}, "PUT", "/admin/realms/master/users/u1/reset-password"),
    ("users", "remove_totp", ("u1",), {}, "PUT", "/admin/realms/master/users/u1/remove-totp"),
    ("users", "add_to_group", ("u1", "g1"), {}, "PUT", "/admin/realms/master/users/u1/groups/g1"),
    ("users", "del_from_group", ("u1", "g1"), {}, "DELETE", "/admin/realms/master/users/u1/groups/g1"),
    ("users", "list_sessions", ("u1",), {}, "GET", "/admin/realms/master/users/u1/sessions"),
    ("users", "logout", ("u1",), {}, "POST", "/admin/realms/master/users/u1/logout"),
    ("users", "impersonation", ("u1",), {}, "POST", "/admin/realms/master/users/u1/impersonation"),
    # Groups
    ("groups", "find", (), {"realm": "demo"}, "GET", "/admin/realms/demo/groups"),
    ("groups", "count", (), {}, "GET", "/admin/realms/master/groups/count"),
    ("groups", "list_members", ("g1",), {}, "GET", "/admin/realms/master/groups/g1/members"),
    ("groups", "del_realm_role_mappings", ("g1", [ROLE]), {}, "DELETE", "/admin/realms/master/groups/g1/role-mappings/realm"),
    # Roles
    ("roles", "find", (), {}, "GET", "/admin/realms/master/roles"),
    ("roles", "find_users_with_role", ("viewer",), {}, "GET", "/admin/realms/master/roles/viewer/users"),
    ("roles", "del_by_id", ("r1",), {}, "DELETE", "/admin/realms/master/roles-by-id/r1"),
    ("roles", "get_composite_roles_for_realm", ("r1",), {}, "GET", "/admin/realms/master/roles-by-id/r1/composites/realm"),
    # Clients
    ("clients", "find", (), {}, "GET", "/admin/realms/master/clients"),
    ("clients", "list_roles", ("c1",), {}, "GET", "/admin/realms/master/clients/c1/roles"),
    ("clients", "get_service_account_user", ("c1",), {}, "GET", "/admin/realms/master/clients/c1/service-account-user"),
    ("clients", "generate_new_client_secret", ("c1",), {}, "POST", "/admin/realms/master/clients/c1/client-secret"),
    ("clients", "get_client_secret", ("c1",), {}, "GET", "/admin/realms/master/clients/c1/client-secret"),
    ("clients", "add_default_client_scope", ("c1", "s1"), {}, "PUT", "/admin/realms/master/clients/c1/default-client-scopes/s1"),
    ("clients", "del_optional_client_scope", ("c1", "s1"), {}, "DELETE", "/admin/realms/master/clients/c1/optional-client-scopes/s1"),
    ("clients", "list_realm_scope_mappings", ("c1",), {}, "GET", "/admin/realms/master/clients/c1/scope-mappings/realm"),
    ("clients", "get_session_count", ("c1",), {}, "GET", "/admin/realms/master/clients/c1/session-count"),
    ("clients", "list_protocol_mappers", ("c1",), {}, "GET", "/admin/realms/master/clients/c1/protocol-mappers/models"),
    # Realms
    ("realms", "find", (), {}, "GET", "/admin/realms"),
    ("realms", "find_one", ("demo",), {}, "GET", "/admin/realms/demo"),
    ("realms", "delete", ("demo",), {}, "DELETE", "/admin/realms/demo"),
    ("realms", "get_default_groups", ("demo",), {}, "GET", "/admin/realms/demo/default-groups"),
    ("realms", "clear_events", ("demo",), {}, "DELETE", "/admin/realms/demo/events"),
    ("realms", "find_admin_events", ("demo",), {}, "GET", "/admin/realms/demo/admin-events"),
    ("realms", "logout_all", ("demo",), {}, "POST", "/admin/realms/demo/logout-all"),
    ("realms", "delete_session", ("demo", "s1"), {}, "DELETE", "/admin/realms/demo/sessions/s1"),
    ("realms", "get_users_management_permissions", ("demo",), {}, "GET", "/admin/realms/demo/users-management-permissions"),
    # Client scopes
    ("client_scopes", "find", (), {}, "GET", "/admin/realms/master/client-scopes"),
    ("client_scopes", "list_default_client_scopes", (), {}, "GET", "/admin/realms/master/default-default-client-scopes"),
    ("client_scopes", "add_default_optional_client_scope", ("s1",), {}, "PUT", "/admin/realms/master/default-optional-client-scopes/s1"),
    ("client_scopes", "list_available_realm_scope_mappings", ("s1",), {}, "GET", "/admin/realms/master/client-scopes/s1/scope-mappings/realm/available"),
    # Identity providers
    ("identity_providers", "find", (), {}, "GET", "/admin/realms/master/identity-provider/instances"),
    ("identity_providers", "delete", ("github",), {}, "DELETE", "/admin/realms/master/identity-provider/instances/github"),
    ("identity_providers", "find_mappers", ("github",), {}, "GET", "/admin/realms/master/identity-provider/instances/github/mappers"),
    # Components
    ("components", "find", (), {}, "GET", "/admin/realms/master/components"),
    ("components", "delete", ("k1",), {}, "DELETE", "/admin/realms/master/components/k1"),
    # Authentication management
    ("authentication_management", "get_required_actions", (), {}, "GET", "/admin/realms/master/authentication/required-actions"),
    ("authentication_management", "raise_required_action_priority", ("VERIFY_EMAIL",), {}, "POST", "/admin/realms/master/authentication/required-actions/VERIFY_EMAIL/raise-priority"),
    ("authentication_management", "get_flows", (), {}, "GET", "/admin/realms/master/authentication/flows"),
    ("authentication_management", "get_executions", ("browser",), {}, "GET", "/admin/realms/master/authentication/flows/browser/executions"),
    ("authentication_management", "del_execution", ("e1",), {}, "DELETE", "/admin/realms/master/authentication/executions/e1"),
    ("authentication_management", "get_config_description", ("auth-otp-form",), {}, "GET", "/admin/realms/master/authentication/config-description/auth-otp-form"),
    ("authentication_management", "del_config", ("cfg1",), {}, "DELETE", "/admin/realms/master/authentication/config/cfg1"),
    # Server info and who am I
    ("server_info", "find", (), {}, "GET", "/admin/serverinfo"),
    ("who_am_i", "find", (), {}, "GET", "/admin/master/console/whoami"),
    ("who_am_i", "find", (), {"realm": "demo"}, "GET", "/admin/demo/console/whoami"),
]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("accessor", "method", "args", "kwargs", "http_method", "path"),
    PATH_CASES,
    ids=[f"{case[0]}.{case[1]}" for case in PATH_CASES],
)
async def test_path_template(
    keycloak, authenticated_client, accessor, method, args, kwargs, http_method, path
):
    await getattr(getattr(authenticated_client, accessor), method)(*args, **kwargs)

    request = keycloak.last_request
    assert request.method == http_method
    assert request.url.path == path


class TestUsers:
    @pytest.mark.asyncio
    async def test_execute_actions_email(self, keycloak, authenticated_client):
        await authenticated_client.users.execute_actions_email(
            "u1",
            ["UPDATE_PASSWORD", "VERIFY_EMAIL"],
            client_id="account",
            lifespan=3600,
        )

        request = keycloak.last_request
        assert request.method == "PUT"
        assert request.url.path == "/admin/realms/master/users/u1/execute-actions-email"
        assert request.url.params["client_id"] == "account"
        assert request.url.params["lifespan"] == "3600"
        assert "redirect_uri" not in request.url.params
        assert json.loads(request.content) == ["UPDATE_PASSWORD", "VERIFY_EMAIL"]

    @pytest.mark.asyncio
    async def test_add_client_role_mappings_sends_role_list(
        self, keycloak, authenticated_client
    ):
        await authenticated_client.users.add_client_role_mappings(
            "u1", "c1", [{"id": "r1", "name": "viewer", "clientRole": True}]
        )

        request = keycloak.last_request
        assert request.url.path == "/admin/realms/master/users/u1/role-mappings/clients/c1"
        assert json.loads(request.content) == [
            {"id": "r1", "name": "viewer", "clientRole": True}
        ]


class TestGroups:
    @pytest.mark.asyncio
    async def test_nested_sub_groups_are_parsed(self, keycloak, authenticated_client):
        keycloak.queue(
            200,
            json=[
                {
                    "id": "g1",
                    "name": "parent",
                    "subGroups": [{"id": "g2", "name": "child", "subGroups": []}],
                }
            ],
        )

        groups = await authenticated_client.groups.find()

        assert groups[0].sub_groups[0].name == "child"

    @pytest.mark.asyncio
    async def test_set_or_create_child(self, keycloak, authenticated_client):
        keycloak.queue(
            201,
            headers={"Location": "http://keycloak:8080/admin/realms/master/groups/g2"},
        )

        created = await authenticated_client.groups.set_or_create_child(
            "g1", {"name": "child"}
        )

        assert created.id == "g2"
        assert keycloak.last_request.url.path == "/admin/realms/master/groups/g1/children"


class TestRealms:
    @pytest.mark.asyncio
    async def test_create_returns_realm_name(self, keycloak, authenticated_client):
        keycloak.queue(
            201, headers={"Location": "http://keycloak:8080/admin/realms/demo"}
        )

        created = await authenticated_client.realms.create(
            {"realm": "demo", "enabled": True}
        )

        assert created.id == "demo"
        assert keycloak.last_request.url.path == "/admin/realms"

    @pytest.mark.asyncio
    async def test_export_flags(self, keycloak, authenticated_client):
        keycloak.queue(200, json={"realm": "demo", "clients": []})

        realm = await authenticated_client.realms.export(
            "demo", export_clients=True
        )

        request = keycloak.last_request
        assert request.url.path == "/admin/realms/demo/partial-export"
        assert request.url.params["exportClients"] == "true"
        assert "exportGroupsAndRoles" not in request.url.params
        assert realm.realm == "demo"

    @pytest.mark.asyncio
    async def test_find_events_query(self, keycloak, authenticated_client):
        keycloak.queue(200, json=[{"type": "LOGIN", "userId": "u1"}])

        events = await authenticated_client.realms.find_events(
            "demo", type="LOGIN", date_from="2024-01-01"
        )

        assert keycloak.last_request.url.params["dateFrom"] == "2024-01-01"
        assert events[0].user_id == "u1"


class TestClientScopes:
    @pytest.mark.asyncio
    async def test_find_one_by_name_filters_list(self, keycloak, authenticated_client):
        keycloak.queue(
            200,
            json=[{"id": "s1", "name": "profile"}, {"id": "s2", "name": "email"}],
        )

        scope = await authenticated_client.client_scopes.find_one_by_name("email")

        assert scope.id == "s2"

    @pytest.mark.asyncio
    async def test_find_one_by_name_missing(self, keycloak, authenticated_client):
        keycloak.queue(200, json=[{"id": "s1", "name": "profile"}])

        assert await authenticated_client.client_scopes.find_one_by_name("x") is None

    @pytest.mark.asyncio
    async def test_del_by_name_deletes_by_id(self, keycloak, authenticated_client):
        keycloak.queue(200, json=[{"id": "s1", "name": "profile"}])

        await authenticated_client.client_scopes.del_by_name("profile")

        request = keycloak.last_request
        assert request.method == "DELETE"
        assert request.url.path == "/admin/realms/master/client-scopes/s1"


class TestIdentityProviders:
    @pytest.mark.asyncio
    async def test_find_mapper_types(self, keycloak, authenticated_client):
        keycloak.queue(
            200,
            json={
                "hardcoded-role-idp-mapper": {
                    "id": "hardcoded-role-idp-mapper",
                    "name": "Hardcoded Role",
                }
            },
        )

        mapper_types = await authenticated_client.identity_providers.find_mapper_types(
            "github"
        )

        assert mapper_types["hardcoded-role-idp-mapper"].name == "Hardcoded Role"

    @pytest.mark.asyncio
    async def test_import_from_url(self, keycloak, authenticated_client):
        keycloak.queue(200, json={"issuer": "https://accounts.example.com"})

        config = await authenticated_client.identity_providers.import_from_url(
            "oidc", "https://accounts.example.com/.well-known/openid-configuration"
        )

        request = keycloak.last_request
        assert request.url.path == (
            "/admin/realms/master/identity-provider/import-config"
        )
        assert json.loads(request.content)["providerId"] == "oidc"
        assert config["issuer"] == "https://accounts.example.com"


class TestComponents:
    @pytest.mark.asyncio
    async def test_list_sub_components(self, keycloak, authenticated_client):
        keycloak.queue(200, json=[{"id": "ldap-mapper", "helpText": "Maps"}])

        types = await authenticated_client.components.list_sub_components(
            "k1", "org.keycloak.storage.ldap.mappers.LDAPStorageMapper"
        )

        request = keycloak.last_request
        assert request.url.path == (
            "/admin/realms/master/components/k1/sub-component-types"
        )
        assert request.url.params["type"] == (
            "org.keycloak.storage.ldap.mappers.LDAPStorageMapper"
        )
        assert types[0].id == "ldap-mapper"


class TestAuthenticationManagement:
    @pytest.mark.asyncio
    async def test_copy_flow(self, keycloak, authenticated_client):
        await authenticated_client.authentication_management.copy_flow(
            "browser", "browser copy"
        )

        request = keycloak.last_request
        assert request.url.path == (
            "/admin/realms/master/authentication/flows/browser/copy"
        )
        assert json.loads(request.content) == {"newName": "browser copy"}

    @pytest.mark.asyncio
    async def test_add_flow_to_flow(self, keycloak, authenticated_client):
        keycloak.queue(
            201,
            headers={
                "Location": "http://keycloak:8080/admin/realms/master/authentication/flows/f2"
            },
        )

        created = await authenticated_client.authentication_management.add_flow_to_flow(
            "my flow", "sub flow", type="form-flow"
        )

        request = keycloak.last_request
        assert "/authentication/flows/my%20flow/executions/flow" in str(request.url)
        assert json.loads(request.content)["type"] == "form-flow"
        assert created.id == "f2"


class TestServerInfo:
    @pytest.mark.asyncio
    async def test_find_parses_system_info(self, keycloak, authenticated_client):
        keycloak.queue(200, json={"systemInfo": {"version": "26.0.0"}})

        info = await authenticated_client.server_info.find()

        assert info.system_info["version"] == "26.0.0"

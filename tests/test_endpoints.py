import httpx
import pytest

from saucerest.accounts import AccountsEndpoint
from saucerest.endpoint import Endpoint, query_parameters
from saucerest.platforms import PlatformEndpoint
from saucerest.sauce_connect import SauceConnectEndpoint
from saucerest.storage import StorageEndpoint

LINKS = {"next": None, "previous": None, "first": "?offset=0", "last": "?offset=0"}

TEAM = {
    "id": "team-1",
    "settings": {"live_only": False, "real_devices": 2, "virtual_machines": 10},
    "group": {"id": "group-1", "name": "QA"},
    "is_default": True,
    "name": "QA",
    "org_uuid": "org-1",
}

ITEM = {
    "id": "file-1",
    "owner": {"id": "user-1", "org_id": "org-1"},
    "name": "app.apk",
    "upload_timestamp": 1700000000,
    "etag": "etag-1",
    "kind": "android",
    "group_id": 42,
    "size": 1024,
    "description": None,
    "metadata": {"identifier": "com.example.app", "version": "1.0"},
    "access": {"team_ids": ["team-1"], "org_ids": []},
    "sha256": "abc",
    "tags": ["nightly"],
}


def serve(json_body, seen=None, status=200):
    def handler(request):
        if seen is not None:
            seen.append(request)
        return httpx.Response(status, json=json_body)
    return handler


class TestEndpointPlumbing:
    def test_url_joins_base_path(self, make_client):
        endpoint = PlatformEndpoint(make_client(serve({})))

        assert endpoint.url("platforms", "appium") == "rest/v1/info/platforms/appium"

    def test_error_status_raises(self, make_client):
        endpoint = Endpoint(make_client(serve({"detail": "nope"}, status=404)))

        with pytest.raises(httpx.HTTPStatusError):
            endpoint.request("anything")

    def test_missing_url_raises(self, make_client):
        endpoint = Endpoint(make_client(serve({})))

        with pytest.raises(httpx.InvalidURL):
            endpoint.request(None)

    def test_download_file_creates_the_directory(self, make_client, tmp_path):
        def handler(request):
            return httpx.Response(200, content=b"payload")

        path = Endpoint(make_client(handler)).download_file("files/1", tmp_path / "a" / "b", "file.bin")

        assert path == tmp_path / "a" / "b" / "file.bin"
        assert path.read_bytes() == b"payload"

    def test_query_parameters_drops_unset_values(self):
        assert query_parameters(a=1, b=None, c="x") == {"a": 1, "c": "x"}


class TestPlatformEndpoint:
    def test_get_test_status(self, make_client):
        seen = []
        body = {"wait_time": 0.5, "service_operational": True, "status_message": "Basic service status checks passed."}

        status = PlatformEndpoint(make_client(serve(body, seen))).get_test_status()

        assert seen[0].url.path == "/rest/v1/info/status"
        assert status.wait_time == 0.5
        assert status.status_message.startswith("Basic service")

    def test_get_supported_platforms(self, make_client):
        seen = []
        body = [{"short_version": "14", "long_name": "Google Chrome", "api_name": "chrome", "os": "Windows 11"}]

        platforms = PlatformEndpoint(make_client(serve(body, seen))).get_supported_platforms("webdriver")

        assert seen[0].url.path == "/rest/v1/info/platforms/webdriver"
        assert platforms[0].api_name == "chrome"

    def test_unknown_automation_api(self, make_client):
        with pytest.raises(ValueError, match="Unknown automation API"):
            PlatformEndpoint(make_client(serve([]))).get_supported_platforms("selenium")

    def test_get_end_of_life_appium_versions(self, make_client):
        seen = []
        body = {"1.22.3": 1672531200, "2.0.0": None}

        versions = PlatformEndpoint(make_client(serve(body, seen))).get_end_of_life_appium_versions()

        assert seen[0].url.path == "/rest/v1/info/platforms/appium/eol"
        assert versions.root["1.22.3"] == 1672531200
        assert versions.root["2.0.0"] is None


class TestStorageEndpoint:
    def test_get_files(self, make_client):
        seen = []
        body = {"items": [ITEM], "links": {"prev": None, "next": None, "self": "?page=1"},
                "page": 1, "per_page": 25, "total_items": 1}

        files = StorageEndpoint(make_client(serve(body, seen))).get_files(kind="android")

        assert seen[0].url.path == "/v1/storage/files"
        assert dict(seen[0].url.params) == {"kind": "android"}
        assert files.total_items == 1
        assert files.items[0].metadata.identifier == "com.example.app"
        assert files.links.self_link == "?page=1"

    def test_get_file_details(self, make_client):
        seen = []

        item = StorageEndpoint(make_client(serve({"item": ITEM}, seen))).get_file_details("file-1")

        assert seen[0].url.path == "/v1/storage/files/file-1"
        assert item.name == "app.apk"
        assert item.tags == ["nightly"]


class TestAccountsEndpoint:
    def test_lookup_users(self, make_client):
        seen = []
        user = {
            "id": "user-1",
            "email": "test_user@example.com",
            "username": "test_user",
            "first_name": "Test",
            "last_name": "User",
            "is_active": True,
            "organization": {"id": "org-1", "name": "Example"},
            "roles": [{"name": "admin", "role": 1}],
            "teams": [TEAM],
        }

        users = AccountsEndpoint(make_client(serve({"links": LINKS, "count": 1, "results": [user]}, seen))).lookup_users(
            username="test", limit=10
        )

        assert seen[0].url.path == "/team-management/v1/users"
        assert dict(seen[0].url.params) == {"username": "test", "limit": "10"}
        assert users.count == 1
        assert users.results[0].teams[0].settings.real_devices == 2

    def test_lookup_teams(self, make_client):
        seen = []

        teams = AccountsEndpoint(make_client(serve({"links": LINKS, "count": 1, "results": [TEAM]}, seen))).lookup_teams(
            name="QA"
        )

        assert seen[0].url.path == "/team-management/v1/teams"
        assert teams.results[0].name == "QA"


class TestSauceConnectEndpoint:
    def test_get_latest_versions(self, make_client):
        seen = []
        download = {"download_url": "https://saucelabs.com/sc.tar.gz", "sha1": "abc"}
        body = {
            "latest_version": "5.2.2",
            "info_url": "https://docs.saucelabs.com/secure-connections/sauce-connect/",
            "warning": "Upgrade recommended",
            "downloads": {"linux": download, "linux-arm64": download, "osx": download, "win32": download},
        }

        versions = SauceConnectEndpoint(make_client(serve(body, seen))).get_latest_versions()

        assert seen[0].url.path == "/rest/v1/public/tunnels/info/versions"
        assert versions.latest_version == "5.2.2"
        assert versions.downloads.linux_arm64.download_url == "https://saucelabs.com/sc.tar.gz"

    def test_get_tunnels_for_a_user(self, make_client):
        seen = []

        tunnels = SauceConnectEndpoint(make_client(serve(["tunnel-1"], seen))).get_tunnels_for_a_user("test_user")

        assert seen[0].url.path == "/rest/v1/test_user/tunnels"
        assert tunnels == ["tunnel-1"]

    def test_get_tunnels_defaults_to_the_client_username(self, make_client):
        seen = []
        endpoint = SauceConnectEndpoint(make_client(serve([], seen)), username="owner")

        assert endpoint.get_tunnels_for_a_user() == []
        assert seen[0].url.path == "/rest/v1/owner/tunnels"

    def test_get_tunnels_given_username_wins(self, make_client):
        seen = []
        endpoint = SauceConnectEndpoint(make_client(serve([], seen)), username="owner")

        endpoint.get_tunnels_for_a_user("someone_else")

        assert seen[0].url.path == "/rest/v1/someone_else/tunnels"

    def test_get_tunnels_without_any_username(self, make_client):
        seen = []
        endpoint = SauceConnectEndpoint(make_client(serve([], seen)))

        with pytest.raises(ValueError):
            endpoint.get_tunnels_for_a_user()

        assert seen == []

"""Tests for the HTTP surface (pagetiles.api.main)."""

import pytest
from fastapi.testclient import TestClient

from pagetiles.api.main import create_app
from pagetiles.config import TilesSettings
from tests.conftest import write


@pytest.fixture
def settings(tmp_path):
    write(
        tmp_path / "tiles" / "defs.yaml",
        """
        definitions:
          - name: base
            path: /layouts/main.html
            attributes:
              title: Site
              body: fragments/empty.html
          - name: userForm
            extends: base
            attributes:
              title: Edit User
              body: fragments/user_form.html
          - name: userForm
            locale: fr
            extends: base
            attributes:
              title: Modifier
              body: fragments/user_form.html
          - name: dashboard
            extends: base
            controller_class: tests.sample_app:RecordingController
          - name: pathless
            attributes:
              title: Nowhere
        """,
    )
    write(tmp_path / "templates" / "layouts" / "main.html", "<h1>{{ tiles.title }}</h1>{% include tiles.body %}")
    write(tmp_path / "templates" / "fragments" / "empty.html", "")
    write(tmp_path / "templates" / "fragments" / "user_form.html", "<form>{{ action.user_id }}</form>")
    write(
        tmp_path / "actions.yaml",
        """
        default_result_type: tiles
        actions:
          - name: editUser
            action_class: tests.sample_app:UserAction
            method: edit
            results:
              success: userForm
          - name: editUserFr
            action_class: tests.sample_app:LocalizedUserAction
            method: edit
            results:
              success: userForm
          - name: dashboard
            action_class: tests.sample_app:UserAction
            method: edit
            results:
              success: dashboard
          - name: ghost
            action_class: tests.sample_app:UserAction
            method: edit
            results:
              success: noSuchDefinition
          - name: pathless
            action_class: tests.sample_app:UserAction
            method: edit
            results:
              success: pathless
          - name: silent
            action_class: tests.sample_app:UserAction
            method: silent
          - name: recordLoop
            action_class: tests.sample_app:UserAction
            method: record_loop
        """,
    )
    return TilesSettings(
        definitions_dir=tmp_path / "tiles",
        templates_dir=tmp_path / "templates",
        actions_file=tmp_path / "actions.yaml",
        default_locale="en",
    )


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


class TestActionRoute:
    def test_user_form(self, client):
        response = client.get("/editUser", params={"user_id": "17"})

        assert response.status_code == 200
        assert response.text == "<h1>Edit User</h1><form>17</form>"

    def test_request_locale_selects_variant(self, client):
        response = client.get("/editUser", headers={"Accept-Language": "fr-BE,fr;q=0.9"})
        assert "<h1>Modifier</h1>" in response.text

    def test_action_locale_selects_variant(self, client):
        response = client.get("/editUserFr", headers={"Accept-Language": "en-US"})
        assert "<h1>Modifier</h1>" in response.text

    def test_form_post_parameters(self, client):
        response = client.post("/editUser", data={"user_id": "99"})
        assert "<form>99</form>" in response.text

    def test_controller_runs(self, client):
        response = client.get("/dashboard")

        assert response.status_code == 200
        assert response.headers["x-tiles-controller"] == "ran"
        assert response.text == "<h1>Site</h1>"

    def test_missing_definition_is_404(self, client):
        response = client.get("/ghost")

        assert response.status_code == 404
        assert response.json()["detail"] == "No Tiles definition found for name 'noSuchDefinition'"

    def test_missing_path_is_404(self, client):
        response = client.get("/pathless")

        assert response.status_code == 404
        assert "Could not determine a path" in response.json()["detail"]

    def test_unknown_action_is_404(self, client):
        assert client.get("/nobody").status_code == 404

    def test_none_result_is_204(self, client):
        assert client.get("/silent").status_code == 204

    def test_action_runs_outside_event_loop(self, client, events):
        assert client.get("/recordLoop").status_code == 204
        assert events == [("loop", "none")]


class TestDefinitionsRoutes:
    def test_list(self, client):
        names = {(d["name"], d["locale"]) for d in client.get("/v1/definitions").json()}
        assert ("userForm", "fr") in names
        assert ("userForm", "") in names

    def test_detail_with_locale(self, client):
        response = client.get("/v1/definitions/userForm", params={"locale": "fr_CA"})

        assert response.status_code == 200
        body = response.json()
        assert body["locale"] == "fr"
        assert body["path"] == "/layouts/main.html"

    def test_detail_missing(self, client):
        assert client.get("/v1/definitions/nope").status_code == 404

    def test_reload(self, client, settings):
        write(settings.definitions_dir / "more.yaml", "definitions:\n  - name: extra\n    path: /x.html\n")

        response = client.post("/v1/definitions/reload")

        assert response.json() == {"reloaded": True, "count": 6}


class TestHealth:
    def test_health(self, client):
        body = client.get("/health").json()
        assert body["status"] == "healthy"
        assert body["definitions_loaded"] == 5
        assert body["actions_loaded"] == 7

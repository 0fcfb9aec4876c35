import os
import time

from infrastructure.operations import OperationResult
from infrastructure.services import providers
from modules.minerals.sessions import SESSION_COOKIE_NAME
from modules.minerals.suggestions import SuggestionService
from tests.helpers import ADMIN_PASSWORD
from tests.factories.minerals import PNG_BYTES, make_publish_form

PUBLISH_FIELDS = make_publish_form().model_dump()


def _suggest(client, **kwargs):
    return client.post(
        "/admin/minerals/suggest",
        files={"image": ("hematite.png", PNG_BYTES, "image/png")},
        data={"suggestion_context": "red streak"},
        **kwargs,
    )


class TestSession:
    def test_status_without_session(self, client):
        body = client.get("/admin").json()
        assert body == {"title": "Admin", "has_admin_session": False}

    def test_login_rejects_bad_password(self, client):
        response = client.post("/admin/login", data={"password": "nope"})
        assert response.status_code == 401
        assert response.json() == {"message": "Invalid admin password."}
        assert SESSION_COOKIE_NAME not in response.cookies

    def test_login_message_is_localized(self, client):
        client.cookies.set("lang", "fr")
        response = client.post("/admin/login", data={"password": "nope"})
        assert response.json() == {"message": "Mot de passe administrateur invalide."}

    def test_login_sets_http_only_cookie(self, client):
        response = client.post("/admin/login", data={"password": ADMIN_PASSWORD})
        assert response.status_code == 200
        cookie = response.headers["set-cookie"]
        assert cookie.startswith(f"{SESSION_COOKIE_NAME}=")
        assert "HttpOnly" in cookie
        assert "samesite=lax" in cookie.lower()
        assert client.get("/admin").json()["has_admin_session"] is True

    def test_login_is_rate_limited(self, client):
        for _ in range(5):
            client.post("/admin/login", data={"password": "nope"})
        response = client.post("/admin/login", data={"password": ADMIN_PASSWORD})
        assert response.status_code == 429

    def test_logout_revokes_session_and_drafts(self, admin_client, draft_store, session_store):
        draft_store.put(PNG_BYTES, "png")
        token = admin_client.cookies.get(SESSION_COOKIE_NAME)

        response = admin_client.post("/admin/logout")

        assert response.status_code == 200
        assert response.json() == {"message": "Admin session closed."}
        assert not session_store.is_valid(token)
        assert len(draft_store) == 0

    def test_protected_routes_require_session(self, client):
        for path in (
            "/admin/minerals/suggest",
            "/admin/minerals/publish",
            "/admin/maintenance/sweep-orphans",
        ):
            response = client.post(path)
            assert response.status_code == 401, path
            assert response.json() == {"detail": "Admin session required. Log in at /admin."}

    def test_forged_cookie_is_rejected(self, client):
        client.cookies.set(SESSION_COOKIE_NAME, "forged")
        assert _suggest(client).status_code == 401


class TestSuggest:
    def test_suggest_creates_draft(self, admin_client, draft_store, suggestion_client):
        response = _suggest(admin_client)

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "AI suggestion generated. Review and publish."
        assert body["form"]["common_name"] == "Hematite"
        assert body["form"]["hardness_mohs"] == "5.50"
        assert body["preview_data_url"].startswith("data:image/png;base64,")
        assert len(draft_store) == 1
        suggestion_client.suggest_mineral.assert_called_once_with(PNG_BYTES, "image/png", "red streak")

    def test_unsupported_image(self, admin_client, draft_store):
        response = admin_client.post(
            "/admin/minerals/suggest",
            files={"image": ("notes.txt", b"hello", "text/plain")},
        )
        assert response.status_code == 400
        assert response.json()["field"] == "image"
        assert len(draft_store) == 0

    def test_oversized_image(self, app, admin_client, draft_store, suggestion_client):
        app.dependency_overrides[providers.get_suggestion_service] = lambda: SuggestionService(
            suggestion_client, draft_store, max_image_bytes=8
        )
        response = _suggest(admin_client)
        assert response.status_code == 400
        assert response.json()["field"] == "image"
        assert "8 bytes" in response.json()["message"]
        suggestion_client.suggest_mineral.assert_not_called()
        assert len(draft_store) == 0

    def test_upstream_failure(self, admin_client, draft_store, suggestion_client):
        suggestion_client.suggest_mineral.return_value = OperationResult.transient_error(
            "Request timed out", error_code="TIMEOUT"
        )
        response = _suggest(admin_client)
        assert response.status_code == 502
        assert response.json() == {"message": "AI suggestion failed: Request timed out"}
        assert len(draft_store) == 0


class TestPublish:
    def test_suggest_then_publish(self, admin_client, minerals_root, draft_store):
        draft_id = _suggest(admin_client).json()["draft_id"]
        response = admin_client.post(
            "/admin/minerals/publish", data={**PUBLISH_FIELDS, "draft_id": draft_id}
        )

        assert response.status_code == 200
        body = response.json()
        identifier = body["identifier"]
        assert identifier.startswith("mineral.iron-oxide.0x")
        assert body["translated_count"] == 9
        assert body["fallback_lang_codes"] == []
        assert body["message"] == (
            f"Mineral published: {identifier}. Localized files: 9 translated."
        )
        assert (minerals_root / identifier / "mineral.json").is_file()
        assert len(draft_store) == 0

        listing = admin_client.get("/minerals").json()
        assert [m["slug"] for m in listing["minerals"]] == [identifier]

    def test_fallback_is_reported(self, admin_client, fake_translator):
        fake_translator.configured = False
        draft_id = _suggest(admin_client).json()["draft_id"]
        body = admin_client.post(
            "/admin/minerals/publish", data={**PUBLISH_FIELDS, "draft_id": draft_id}
        ).json()
        assert body["translated_count"] == 0
        assert len(body["fallback_lang_codes"]) == 9
        assert "Fallback used for: es, cs" in body["message"]

    def test_unknown_draft(self, admin_client, minerals_root):
        response = admin_client.post(
            "/admin/minerals/publish", data={**PUBLISH_FIELDS, "draft_id": "missing"}
        )
        assert response.status_code == 404
        assert response.json() == {"message": "draft not found or expired"}
        assert list(minerals_root.iterdir()) == []

    def test_invalid_number_keeps_draft(self, admin_client, draft_store):
        draft_id = _suggest(admin_client).json()["draft_id"]
        response = admin_client.post(
            "/admin/minerals/publish",
            data={**PUBLISH_FIELDS, "draft_id": draft_id, "hardness_mohs": "hard"},
        )
        assert response.status_code == 400
        assert response.json()["field"] == "hardness_mohs"
        assert len(draft_store) == 1


class TestSweepOrphans:
    def test_removes_old_incomplete_folders(self, admin_client, minerals_root):
        orphan = minerals_root / "mineral.oxide.0x0a0b0c"
        orphan.mkdir()
        (orphan / "image.png").write_bytes(PNG_BYTES)
        past = time.time() - 7200
        os.utime(orphan, (past, past))

        response = admin_client.post("/admin/maintenance/sweep-orphans")

        assert response.status_code == 200
        assert response.json() == {
            "message": "Removed 1 incomplete folders.",
            "removed": ["mineral.oxide.0x0a0b0c"],
        }
        assert not orphan.exists()

    def test_zero_grace_does_not_sweep_in_flight_publish(self, admin_client, minerals_root):
        in_flight = minerals_root / "mineral.oxide.0x0a0b0c"
        in_flight.mkdir()
        response = admin_client.post("/admin/maintenance/sweep-orphans?grace_seconds=0")
        assert response.json()["removed"] == []
        assert in_flight.exists()

    def test_recent_folders_are_kept(self, admin_client, minerals_root):
        orphan = minerals_root / "mineral.oxide.0x0a0b0c"
        orphan.mkdir()
        response = admin_client.post("/admin/maintenance/sweep-orphans")
        assert response.json()["removed"] == []
        assert orphan.exists()

from __future__ import annotations

import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.api.deps import get_db_session, get_translation_service
from app.core.app import create_app


@pytest_asyncio.fixture()
async def translations_client(
    session_factory: async_sessionmaker[AsyncSession],
) -> TestClient:
    app = create_app()

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


def _create(client: TestClient, **overrides) -> dict:
    payload = {
        "locale_id": 1,
        "key": "welcome.title",
        "value": "Welcome",
        "device_type": "desktop",
    }
    payload.update(overrides)
    response = client.post("/api/translations", json=payload)
    assert response.status_code == 200, response.text
    return response.json()["data"]


def test_create_translation_returns_envelope_with_defaults(translations_client: TestClient) -> None:
    response = translations_client.post(
        "/api/translations",
        json={"locale_id": 1, "key": "welcome.title", "value": "Welcome", "device_type": "desktop"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Translation added successfully."
    assert body["data"]["key"] == "welcome.title"
    assert body["data"]["group"] == "general"
    assert body["data"]["is_active"] is True
    assert body["data"]["locale"] == "en"

    fetched = translations_client.get(f"/api/translations/{body['data']['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["data"] == body["data"]


def test_duplicate_create_returns_400(translations_client: TestClient) -> None:
    _create(translations_client)

    response = translations_client.post(
        "/api/translations",
        json={"locale_id": 1, "key": "welcome.title", "value": "Hi", "device_type": "desktop"},
    )

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "message": "translation key already exists, Please try again with different key.",
    }
    listing = translations_client.get("/api/translations").json()
    assert listing["data"]["total"] == 1


def test_create_validation_errors_are_reported_per_field(translations_client: TestClient) -> None:
    response = translations_client.post(
        "/api/translations",
        json={"locale_id": 1, "key": "k" * 256, "value": "   ", "group": "g" * 51},
    )

    assert response.status_code == 422
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "The given data was invalid."
    assert set(body["errors"]) == {"key", "value", "device_type", "group"}


def test_create_with_unknown_locale_is_rejected(translations_client: TestClient) -> None:
    response = translations_client.post(
        "/api/translations",
        json={"locale_id": 99, "key": "a", "value": "b", "device_type": "mobile"},
    )

    assert response.status_code == 422
    assert response.json()["errors"] == {"locale_id": ["The selected locale id is invalid."]}


def test_show_missing_translation_returns_404(translations_client: TestClient) -> None:
    response = translations_client.get("/api/translations/12345")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Translation not found"}


def test_update_translation(translations_client: TestClient) -> None:
    created = _create(translations_client)

    response = translations_client.put(
        f"/api/translations/{created['id']}",
        json={
            "locale_id": 2,
            "key": "welcome.title",
            "value": "Bienvenue",
            "device_type": "mobile",
            "group": "landing",
            "is_active": False,
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Translation updated successfully."
    assert body["data"]["id"] == created["id"]
    assert body["data"]["locale"] == "fr"
    assert body["data"]["value"] == "Bienvenue"
    assert body["data"]["is_active"] is False


def test_update_missing_translation_returns_404(translations_client: TestClient) -> None:
    response = translations_client.put(
        "/api/translations/777",
        json={"locale_id": 1, "key": "a", "value": "b", "device_type": "desktop"},
    )

    assert response.status_code == 404
    assert translations_client.get("/api/translations").json()["data"]["total"] == 0


def test_update_to_duplicate_returns_400(translations_client: TestClient) -> None:
    _create(translations_client, key="first")
    second = _create(translations_client, key="second")

    response = translations_client.put(
        f"/api/translations/{second['id']}",
        json={"locale_id": 1, "key": "first", "value": "x", "device_type": "desktop"},
    )

    assert response.status_code == 400
    assert translations_client.get(f"/api/translations/{second['id']}").json()["data"]["key"] == "second"


def test_delete_then_fetch_returns_404(translations_client: TestClient) -> None:
    created = _create(translations_client)

    deleted = translations_client.delete(f"/api/translations/{created['id']}")
    assert deleted.status_code == 200
    assert deleted.json() == {"success": True, "message": "Translation deleted successfully"}

    assert translations_client.get(f"/api/translations/{created['id']}").status_code == 404
    assert translations_client.delete(f"/api/translations/{created['id']}").status_code == 404


def test_list_translations_paginates_and_filters(translations_client: TestClient) -> None:
    for index in range(3):
        _create(translations_client, key=f"menu.{index}", value=f"Menu {index}")
    _create(translations_client, key="menu.0", value="Menu", device_type="mobile")

    first_page = translations_client.get("/api/translations", params={"per_page": 1})
    mobile = translations_client.get("/api/translations", params={"device_type": "mobile"})
    clamped = translations_client.get("/api/translations", params={"per_page": 1000})

    page = first_page.json()["data"]
    assert first_page.json()["message"] == "Translations data"
    assert len(page["items"]) == 1
    assert page["total"] == 4
    assert page["last_page"] == 4
    assert mobile.json()["data"]["total"] == 1
    assert clamped.json()["data"]["per_page"] == 100


def test_list_translations_rejects_non_numeric_page(translations_client: TestClient) -> None:
    response = translations_client.get("/api/translations", params={"page": "two"})

    assert response.status_code == 422
    assert "page" in response.json()["errors"]


def test_translations_by_locale(translations_client: TestClient) -> None:
    _create(translations_client, key="title")
    _create(translations_client, key="title", device_type="mobile")
    _create(translations_client, key="title", locale_id=2, value="Titre")

    english = translations_client.get("/api/translations/locale/en")
    english_mobile = translations_client.get(
        "/api/translations/locale/en", params={"device_type": "mobile"}
    )
    unknown = translations_client.get("/api/translations/locale/xx")

    assert english.status_code == 200
    assert english.json()["message"] == "Translation data"
    assert {item["locale"] for item in english.json()["data"]} == {"en"}
    assert len(english.json()["data"]) == 2
    assert [item["device_type"] for item in english_mobile.json()["data"]] == ["mobile"]
    assert unknown.status_code == 404
    assert unknown.json() == {"success": False, "message": "Locale not found"}


class _ExplodingService:
    async def get_translation(self, translation_id: int):
        raise RuntimeError("connection reset by peer at 10.0.0.5")


def test_unexpected_errors_are_opaque(translations_client: TestClient) -> None:
    app = translations_client.app
    app.dependency_overrides[get_translation_service] = lambda: _ExplodingService()
    client = TestClient(app, raise_server_exceptions=False)

    response = client.get("/api/translations/1")

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Server Error"}
    assert "10.0.0.5" not in response.text


def test_oversized_ids_in_path_are_not_found(translations_client: TestClient) -> None:
    huge = 10**20
    body = {"locale_id": 1, "key": "a", "value": "b", "device_type": "desktop"}

    shown = translations_client.get(f"/api/translations/{huge}")
    updated = translations_client.put(f"/api/translations/{huge}", json=body)
    deleted = translations_client.delete(f"/api/translations/{huge}")

    assert [shown.status_code, updated.status_code, deleted.status_code] == [404, 404, 404]
    assert shown.json() == {"success": False, "message": "Translation not found"}


def test_out_of_range_locale_id_is_a_validation_error(translations_client: TestClient) -> None:
    created = translations_client.post(
        "/api/translations",
        json={"locale_id": 10**20, "key": "a", "value": "b", "device_type": "desktop"},
    )
    listed = translations_client.get("/api/translations", params={"locale_id": 10**20})

    assert created.status_code == 422
    assert "locale_id" in created.json()["errors"]
    assert listed.status_code == 422
    assert "locale_id" in listed.json()["errors"]


def test_huge_page_number_returns_an_empty_page(translations_client: TestClient) -> None:
    _create(translations_client)

    response = translations_client.get("/api/translations", params={"page": 10**19})

    assert response.status_code == 200
    page = response.json()["data"]
    assert page["items"] == []
    assert page["total"] == 1
    assert page["page"] == 2**31 - 1

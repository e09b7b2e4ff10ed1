"""Tests for admin endpoints."""

from fastapi.testclient import TestClient

from nutri_balance.api.app import create_app
from nutri_balance.containers import AppContainer
from nutri_balance.services.state import CATALOG_KEY, RECOMMENDATIONS_KEY

HEADERS = {"X-Admin-Token": "admin-token"}


def _client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


def test_admin_lists_foods_with_positions(container: AppContainer) -> None:
    response = _client(container).get("/admin/foods", headers=HEADERS)

    foods = response.json()["foods"]
    assert foods[4]["index"] == 4
    assert foods[4]["name"] == "Egg"


def test_admin_add_food_defaults_to_zeroed_entry(container: AppContainer) -> None:
    response = _client(container).post("/admin/foods", headers=HEADERS)

    assert response.status_code == 201
    assert response.json()["name"] == ""
    assert response.json()["calories"] == 0
    assert len(container.catalog.items) == 6


def test_admin_add_food_with_values(container: AppContainer) -> None:
    response = _client(container).post(
        "/admin/foods",
        headers=HEADERS,
        json={"name": "Kiwi", "calories": 61, "vitaminC": 92.7},
    )

    assert response.status_code == 201
    assert container.catalog.lookup("Kiwi").vitamin_c == 92.7


def test_admin_edit_food_field(container: AppContainer, state_repository) -> None:
    response = _client(container).patch(
        "/admin/foods/3", headers=HEADERS, json={"field": "carbs", "value": 30}
    )

    assert response.status_code == 200
    assert response.json()["carbs"] == 30
    assert state_repository.load(CATALOG_KEY)[3]["carbs"] == 30


def test_admin_edit_food_errors(container: AppContainer) -> None:
    client = _client(container)

    missing = client.patch(
        "/admin/foods/99", headers=HEADERS, json={"field": "name", "value": "x"}
    )
    unknown_field = client.patch(
        "/admin/foods/0", headers=HEADERS, json={"field": "sugar", "value": 1}
    )
    bad_value = client.patch(
        "/admin/foods/0", headers=HEADERS, json={"field": "fat", "value": "lots"}
    )

    assert missing.status_code == 404
    assert unknown_field.status_code == 422
    assert bad_value.status_code == 422


def test_admin_remove_food(container: AppContainer) -> None:
    client = _client(container)

    response = client.delete("/admin/foods/0", headers=HEADERS)
    missing = client.delete("/admin/foods/10", headers=HEADERS)

    assert response.json()["name"] == "Apple"
    assert container.catalog.lookup("Apple") is None
    assert missing.status_code == 404


def test_admin_update_threshold(container: AppContainer, state_repository) -> None:
    response = _client(container).put(
        "/admin/recommendations/protein/child", headers=HEADERS, json={"value": 34}
    )

    assert response.status_code == 200
    assert response.json()["recommendations"]["protein"] == {
        "adult": 50,
        "child": 34,
    }
    assert state_repository.load(RECOMMENDATIONS_KEY)["protein"]["child"] == 34


def test_admin_update_threshold_rejects_unknown_keys(
    container: AppContainer,
) -> None:
    client = _client(container)

    nutrient = client.put(
        "/admin/recommendations/sodium/adult", headers=HEADERS, json={"value": 1}
    )
    group = client.put(
        "/admin/recommendations/protein/teen", headers=HEADERS, json={"value": 1}
    )

    assert nutrient.status_code == 404
    assert group.status_code == 404
    assert "sodium" not in container.recommendations.table


def test_admin_submissions_and_csv_export(container: AppContainer) -> None:
    client = _client(container)
    empty = client.get("/admin/submissions.csv", headers=HEADERS)
    client.post(
        "/analysis",
        json={
            "age": 16,
            "weight": 55,
            "height": 165,
            "meals": [{"food": "Rice", "portion": 2}],
        },
    )

    listing = client.get("/admin/submissions", headers=HEADERS).json()
    export = client.get("/admin/submissions.csv", headers=HEADERS)

    assert empty.text == ""
    submission = listing["submissions"][0]
    assert submission["meals_summary"] == "Rice (2)"
    assert submission["nutrients_summary"].startswith("calories: 260.0")
    assert export.headers["content-type"].startswith("text/csv")
    assert "nutri_submissions.csv" in export.headers["content-disposition"]
    lines = export.text.split("\n")
    assert len(lines) == 2
    assert lines[0] == "age,weight,height,activity,meals,nutrients,date"


def test_admin_rejects_non_finite_values(container: AppContainer) -> None:
    client = _client(container)

    edited = client.patch(
        "/admin/foods/0", headers=HEADERS, json={"field": "protein", "value": "nan"}
    )
    added = client.post(
        "/admin/foods", headers=HEADERS, json={"name": "Bad", "calories": "inf"}
    )
    threshold = client.put(
        "/admin/recommendations/fat/adult", headers=HEADERS, json={"value": "nan"}
    )

    assert edited.status_code == 422
    assert added.status_code == 422
    assert threshold.status_code == 422
    assert container.catalog.items[0].protein == 0.3
    assert container.catalog.lookup("Bad") is None
    assert container.recommendations.table["fat"]["adult"] == 70

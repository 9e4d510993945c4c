"""
HTTP API tests.

Tests:
1-4.   Health + catalog listing/detail
5-9.   Calculate endpoint (result, cards, 404, 422, save)
10-14. Calculation history (list, get, delete, limit, disabled)
15-16. PDF download
"""

from flooring_calc import models
from flooring_calc.config import settings


# ============================================================
# Catalog
# ============================================================

def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["calculators"] == 30


def test_list_calculators(client):
    response = client.get("/api/calculators/")
    assert response.status_code == 200
    assert len(response.json()) == 30

    response = client.get("/api/calculators/", params={"category": "costs"})
    assert [c["id"] for c in response.json()] == ["labor-cost", "installation-cost"]


def test_list_calculators_unknown_category(client):
    response = client.get("/api/calculators/", params={"category": "outdoor"})
    assert response.status_code == 400
    assert "Unknown category" in response.json()["detail"]


def test_calculator_detail_includes_input_schema(client):
    response = client.get("/api/calculators/hardwood")
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Hardwood Calculator"
    assert data["category"] == "materials"
    props = data["input_schema"]["properties"]
    assert props["installation_type"]["enum"] == ["nail-down", "glue-down", "floating"]
    assert data["input_schema"]["required"] == ["room_length", "room_width"]
    assert data["example_inputs"]["installation_type"] == "nail-down"

    assert client.get("/api/calculators/bamboo").status_code == 404


# ============================================================
# Calculate
# ============================================================

def test_calculate_returns_result_and_cards(client):
    response = client.post("/api/calculators/tile/calculate",
                           json={"room_length": 12, "room_width": 10})
    assert response.status_code == 200
    data = response.json()
    assert data["calculator"] == "tile"
    assert data["result"]["tiles_with_waste"] == 132
    # defaults are filled in
    assert data["inputs"]["tile_length"] == 12
    assert data["calculation_id"] is None
    cards = {c["key"]: c for c in data["cards"]}
    assert cards["tiles_with_waste"]["display"] == "132 tiles"


def test_calculate_unknown_calculator_404(client):
    response = client.post("/api/calculators/bamboo/calculate", json={"room_length": 12})
    assert response.status_code == 404


def test_calculate_invalid_input_422(client):
    response = client.post("/api/calculators/tile/calculate",
                           json={"room_length": -1, "room_width": 10})
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail[0]["field"] == "room_length"
    assert "message" in detail[0]


def test_calculate_unknown_option_422(client):
    response = client.post("/api/calculators/carpet/calculate",
                           json={"room_length": 12, "room_width": 10, "carpet_width": "20-ft"})
    assert response.status_code == 422
    assert response.json()["detail"][0]["field"] == "carpet_width"


def test_calculate_with_save_records_history(client, db):
    response = client.post("/api/calculators/multi-room/calculate?save=true", json={
        "rooms": [{"name": "Den", "length": 12, "width": 12}],
    })
    assert response.status_code == 200
    calculation_id = response.json()["calculation_id"]
    assert calculation_id is not None

    record = db.query(models.Calculation).filter(models.Calculation.id == calculation_id).first()
    assert record.calculator_type == "multi-room"
    assert record.inputs["rooms"][0]["name"] == "Den"
    assert record.results["total_area"] == 144


# ============================================================
# History
# ============================================================

def test_list_and_get_calculations(client, saved_calculation):
    client.post("/api/calculators/stair/calculate?save=true", json={"number_of_steps": 12})

    response = client.get("/api/calculations/")
    assert response.status_code == 200
    records = response.json()
    assert len(records) == 2
    assert records[0]["calculator_type"] == "stair"   # most recent first

    filtered = client.get("/api/calculations/", params={"calculator_type": "tile"}).json()
    assert [r["id"] for r in filtered] == [saved_calculation["calculation_id"]]

    response = client.get(f"/api/calculations/{saved_calculation['calculation_id']}")
    assert response.status_code == 200
    assert response.json()["results"]["tiles_needed"] == 120


def test_get_missing_calculation_404(client):
    assert client.get("/api/calculations/999").status_code == 404


def test_delete_calculation(client, saved_calculation):
    calculation_id = saved_calculation["calculation_id"]
    response = client.delete(f"/api/calculations/{calculation_id}")
    assert response.status_code == 200
    assert response.json() == {"ok": True}
    assert client.get(f"/api/calculations/{calculation_id}").status_code == 404
    assert client.delete(f"/api/calculations/{calculation_id}").status_code == 404


def test_history_page_limit(client, monkeypatch):
    monkeypatch.setattr(settings, "HISTORY_PAGE_LIMIT", 2)
    for _ in range(3):
        client.post("/api/calculators/tile/calculate?save=true",
                    json={"room_length": 12, "room_width": 10})
    assert len(client.get("/api/calculations/").json()) == 2


def test_history_disabled_skips_save(client, monkeypatch):
    monkeypatch.setattr(settings, "HISTORY_ENABLED", False)
    response = client.post("/api/calculators/tile/calculate?save=true",
                           json={"room_length": 12, "room_width": 10})
    assert response.status_code == 200
    assert response.json()["calculation_id"] is None
    assert client.get("/api/calculations/").json() == []


# ============================================================
# PDF
# ============================================================

def test_download_pdf(client, saved_calculation):
    response = client.get(f"/api/calculations/{saved_calculation['calculation_id']}/pdf")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert "tile-" in response.headers["content-disposition"]
    assert response.content[:5] == b"%PDF-"


def test_download_pdf_missing_calculation(client):
    assert client.get("/api/calculations/999/pdf").status_code == 404

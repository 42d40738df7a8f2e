"""Tests for the HTTP API (records, public page, downloads)."""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client(env_dirs):
    from backend.main import app

    return TestClient(app)


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_put_then_get_material(client):
    body = {"materialId": "IGNORED", "fittingType": "GFN Liner", "failureCount": 2, "unknownKey": True}
    resp = client.put("/api/materials/GFN0001", json=body)
    assert resp.status_code == 200
    assert resp.json() == {"materialId": "GFN0001", "fittingType": "GFN Liner", "failureCount": 2}

    resp = client.get("/api/materials/GFN0001")
    assert resp.status_code == 200
    assert resp.json()["fittingType"] == "GFN Liner"
    assert client.get("/api/materials").json() == ["GFN0001"]


def test_get_unknown_material_404(client):
    assert client.get("/api/materials/NOPE000").status_code == 404


def test_invalid_material_id_400(client):
    assert client.get("/api/materials/bad.id").status_code == 400
    assert client.put("/api/materials/bad.id", json={}).status_code == 400


def test_invalid_record_422(client):
    resp = client.put("/api/materials/ABC1234", json={"installationStatus": "Removed"})
    assert resp.status_code == 422


def test_download_report_for_stored_material(client):
    client.put("/api/materials/ABC1234", json={"fittingType": "Elastic Rail Clip"})
    resp = client.get("/api/download/ABC1234/report")
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/pdf"
    assert resp.headers["content-disposition"] == 'attachment; filename="ABC1234_Railway_Report.pdf"'
    assert resp.content.startswith(b"%PDF")


def test_download_report_unknown_material(client):
    assert client.get("/api/download/NOPE000/report").status_code == 404


def test_post_adhoc_report_without_id(client):
    resp = client.post("/api/download/report", json={"fittingType": "Elastic Rail Clip"})
    assert resp.status_code == 200
    assert resp.headers["content-disposition"] == 'attachment; filename="MATERIAL_Railway_Report.pdf"'


def test_report_failure_returns_500(client, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("canvas exploded")

    monkeypatch.setattr("trackfit.report.pdf.render_material_pdf", boom)
    resp = client.post("/api/download/report", json={"materialId": "ABC1234"})
    assert resp.status_code == 500
    assert "canvas exploded" in resp.json()["detail"]


def test_qr_downloads(client):
    svg = client.get("/api/download/ABC1234/qr.svg")
    assert svg.status_code == 200
    assert svg.headers["content-type"].startswith("image/svg+xml")
    png = client.get("/api/download/ABC1234/qr.png")
    assert png.content.startswith(b"\x89PNG")
    assert client.get("/api/download/ABC1234/qr.gif").status_code == 400


def test_public_material_page(client):
    client.put("/api/materials/ABC1234", json={"fittingType": "Elastic Rail Clip"})
    resp = client.get("/materials/ABC1234")
    assert resp.status_code == 200
    assert "text/html" in resp.headers["content-type"]
    assert "Elastic Rail Clip" in resp.text
    assert "/api/download/ABC1234/report" in resp.text
    assert client.get("/materials/NOPE000").status_code == 404

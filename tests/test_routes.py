"""Tests for the admin panel routes."""

import json

from fastapi.testclient import TestClient

from quota_admin.main import create_app


def test_root_redirects_to_configs(client):
    response = client.get("/", follow_redirects=False)
    assert response.status_code in (302, 307)
    assert response.headers["location"] == "/configs"


def test_configs_page_lists_rows(client):
    response = client.get("/configs")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")

    body = response.text
    assert body.count('class="config"') == 3
    assert body.index('data-version="5"') < body.index('data-version="2"') < body.index('data-version="1"')
    assert '<span class="user"> by alice at </span>' in body
    assert '<span class="user"> by unknown at </span>' in body


def test_empty_configs_page(monkeypatch):
    monkeypatch.delenv("CONFIGS_FILE", raising=False)
    with TestClient(create_app(history=None)) as client:
        response = client.get("/configs")
    assert response.status_code == 200
    assert "No config versions available" in response.text


def test_single_row(client):
    response = client.get("/configs/5")
    assert response.status_code == 200
    assert response.text.startswith('<div class="config" data-version="5"')
    assert '<span class="date" style="white-space: pre-line">22:13\n11/14/2023\nUTC</span>' in response.text


def test_single_row_unknown_version(client):
    response = client.get("/configs/99")
    assert response.status_code == 404
    assert response.json()["detail"] == "Version not found"


def test_list_configs(client):
    response = client.get("/api/configs")
    assert response.status_code == 200

    data = response.json()
    assert [c["version"] for c in data["configs"]] == [5, 2, 1]
    assert data["labels"]["1"] == {"version": "v1", "user": " by unknown at ", "date": "unknown"}
    assert data["selected"] is None


def test_select_config(client, history):
    response = client.post("/api/configs/2/select")
    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "selected": {"version": 2, "user": "bob", "date": 1700003600},
    }
    assert history.selected_version == 2

    page = client.get("/configs").text
    assert 'class="config selected" data-version="2"' in page
    assert client.get("/api/configs").json()["selected"] == 2


def test_select_unknown_config(client, history):
    response = client.post("/api/configs/99/select")
    assert response.status_code == 404
    assert history.selected_version is None


def test_app_loads_snapshot_file(tmp_path, monkeypatch):
    path = tmp_path / "configs.json"
    path.write_text(json.dumps({"configs": [{"version": 3, "user": "carol", "date": 1700000000}]}))
    monkeypatch.setenv("CONFIGS_FILE", str(path))

    with TestClient(create_app()) as client:
        data = client.get("/api/configs").json()

    assert data["configs"] == [{"version": 3, "user": "carol", "date": 1700000000}]


def test_app_starts_with_a_bad_record_in_snapshot(tmp_path, monkeypatch):
    path = tmp_path / "configs.json"
    path.write_text(json.dumps({"configs": [
        {"version": 10, "user": "alice", "date": 1700000000},
        {"version": 11, "user": 42, "date": 1700003600},
    ]}))
    monkeypatch.setenv("CONFIGS_FILE", str(path))

    with TestClient(create_app()) as client:
        page = client.get("/configs").text

    assert 'data-version="10"' in page
    assert 'data-version="11"' not in page


def test_single_row_keeps_date_lines_apart(client):
    row = client.get("/configs/5").text
    assert 'style="white-space: pre-line"' in row

import asyncio
import time
from pathlib import Path

import httpx
import pytest
from fastapi.testclient import TestClient

from config import settings
from stages.s0_loading.loader import WorkbookLoader
from web.api import app

XLSX_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@pytest.fixture
def client(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(settings, "FRONTEND_DIR", str(tmp_path / "frontend"))
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(tmp_path / "uploads"))
    monkeypatch.setattr(settings, "SCAFFOLD_ENABLED", False)
    return TestClient(app)


def upload(client, path: Path):
    with open(path, "rb") as handle:
        return client.post("/generate", files={"file": (path.name, handle, XLSX_TYPE)})


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_generate_success(client, make_workbook, user_sheet, tmp_path: Path):
    path = make_workbook([user_sheet])

    response = upload(client, path)

    assert response.status_code == 200
    assert response.json() == {"message": "Generation successful!", "modelsGenerated": ["User"]}
    assert (tmp_path / "frontend" / "src" / "routes" / "routes.tsx").exists()
    assert list((tmp_path / "uploads").iterdir()) == []


def test_generate_without_file(client):
    response = client.post("/generate")

    assert response.status_code == 400
    assert "message" in response.json()


def test_generate_with_no_models(client, make_workbook, tmp_path: Path):
    path = make_workbook([
        {"title": "Audit", "row1": ["no_crud"], "rows": [["action", "varchar", "text", "N"]]},
    ])

    response = upload(client, path)

    assert response.status_code == 400
    assert response.json() == {"message": "No models found."}
    assert list((tmp_path / "uploads").iterdir()) == []


def test_generate_rejects_unreadable_upload(client, tmp_path: Path):
    bogus = tmp_path / "notes.txt"
    bogus.write_text("not a workbook", encoding="utf-8")

    response = upload(client, bogus)

    assert response.status_code == 400


def test_generate_unexpected_failure(client, make_workbook, user_sheet, tmp_path: Path):
    # a file where the frontend directory should be makes the writer fail
    (tmp_path / "frontend").write_text("in the way", encoding="utf-8")
    path = make_workbook([user_sheet])

    response = upload(client, path)

    assert response.status_code == 500
    body = response.json()
    assert set(body) == {"message", "error", "stack"}
    assert "Traceback" in body["stack"]
    assert list((tmp_path / "uploads").iterdir()) == []


@pytest.mark.asyncio
async def test_health_responds_while_generation_runs(client, make_workbook, user_sheet, monkeypatch):
    original_load = WorkbookLoader.load

    def slow_load(self, file_path):
        time.sleep(1.0)
        return original_load(self, file_path)

    monkeypatch.setattr(WorkbookLoader, "load", slow_load)
    path = make_workbook([user_sheet])
    transport = httpx.ASGITransport(app=app)

    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
        async def generate():
            return await http.post(
                "/generate",
                files={"file": (path.name, path.read_bytes(), XLSX_TYPE)},
            )

        async def health():
            await asyncio.sleep(0.2)
            started = time.perf_counter()
            response = await http.get("/health")
            return response, time.perf_counter() - started

        generated, (healthy, latency) = await asyncio.gather(generate(), health())

    assert generated.status_code == 200
    assert healthy.status_code == 200
    assert latency < 0.5

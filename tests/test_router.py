"""Tests router FastAPI : endpoints /email-templates/* et /health."""
import pytest
from fastapi.testclient import TestClient

from email_composer.app import create_app


@pytest.fixture(scope="module")
def client():
    return TestClient(create_app())


def _visual(**kw) -> dict:
    body = {
        "blocks": [
            {"id": "1", "kind": "greeting", "content": "Hi {{userName}},"},
            {"id": "2", "kind": "button", "content": "Open", "properties": {"url": "{{linkUrl}}"}},
        ],
        "headerTitle": "Hello",
        "headerColor": "#10B981",
    }
    body.update(kw)
    return body


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


# ── Rendu / validation ───────────────────────────────────────────────────────

def test_render_returns_html(client):
    r = client.post("/email-templates/render", json=_visual())
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert r.headers["x-render-warnings"] == "0"
    assert "Hi {{userName}}," in r.text


def test_render_accepts_legacy_type_key(client):
    body = _visual(blocks=[{"id": "1", "type": "text", "content": "legacy"}])
    r = client.post("/email-templates/render", json=body)
    assert r.status_code == 200
    assert "legacy" in r.text


def test_render_counts_warnings(client):
    body = _visual(blocks=[{"id": "x", "kind": "marquee", "content": "?"}], headerColor="blue")
    r = client.post("/email-templates/render", json=body)
    assert r.headers["x-render-warnings"] == "2"


def test_validate(client):
    body = _visual(blocks=[
        {"id": "a", "kind": "marquee"},
        {"id": "b", "kind": "button", "content": "Go"},
    ])
    data = client.post("/email-templates/validate", json=body).json()
    assert data["valid"] is False
    assert [e["code"] for e in data["errors"]] == ["UNKNOWN_BLOCK_KIND", "MISSING_BLOCK_PROPERTY"]
    assert data["errors"][1]["property"] == "url"


def test_validate_ok(client):
    data = client.post("/email-templates/validate", json=_visual()).json()
    assert data == {"valid": True, "errors": [], "warnings": []}


# ── Aperçu / compile ─────────────────────────────────────────────────────────

def test_preview_with_sample_values(client):
    r = client.post("/email-templates/preview", json={"subject": "Hi {{userName}}", "visualData": _visual()})
    data = r.json()
    assert data["subject"] == "Hi John Doe"
    assert "Hi John Doe," in data["html"]


def test_preview_with_custom_values(client):
    body = {"subject": "Hi {{userName}}", "visualData": _visual(), "values": {"userName": "Ada"}}
    assert client.post("/email-templates/preview", json=body).json()["subject"] == "Hi Ada"


def test_compile(client):
    r = client.post("/email-templates/compile", json={"subject": "Hello {{userName}}", "visualData": _visual()})
    assert r.status_code == 200
    data = r.json()
    assert data["availableVariables"] == ["userName", "linkUrl"]
    assert data["htmlContent"].startswith("<!DOCTYPE html>")


def test_compile_incomplete_is_422(client):
    r = client.post("/email-templates/compile", json={"subject": "", "visualData": _visual()})
    assert r.status_code == 422
    assert r.json()["detail"] == {"code": "TEMPLATE_INCOMPLETE", "field": "subject"}


def test_compile_invalid_block_is_422(client):
    body = {"subject": "s", "visualData": _visual(blocks=[{"id": "b", "kind": "button", "content": "Go"}])}
    r = client.post("/email-templates/compile", json=body)
    assert r.status_code == 422
    assert r.json()["detail"]["code"] == "MISSING_BLOCK_PROPERTY"


# ── Catalogue ────────────────────────────────────────────────────────────────

def test_catalog_listing(client):
    data = client.get("/email-templates/catalog").json()
    assert len(data["templates"]) == 25
    assert len(data["categories"]) == 7
    entry = next(t for t in data["templates"] if t["slug"] == "payment-received")
    assert entry["blockCount"] == 6
    assert entry["headerColor"] == "#10B981"


def test_catalog_instance(client):
    data = client.get("/email-templates/catalog/payment-received").json()
    assert data["isDefault"] is True
    assert data["subject"] == "Payment received: {{amount}}"
    assert len(data["visualData"]["blocks"]) == 6
    assert data["visualData"]["headerTitle"] == "Payment Received!"


def test_catalog_instance_unknown_slug(client):
    data = client.get("/email-templates/catalog/custom-thing").json()
    assert data["isDefault"] is False
    assert data["visualData"]["blocks"] == []
    assert data["visualData"]["headerTitle"] == "Notification"


def test_reconcile_legacy_record(client):
    body = {"slug": "password-reset", "subject": "Reset", "htmlContent": "<p>old</p>"}
    data = client.post("/email-templates/reconcile", json=body).json()
    assert data["blocks"][0]["kind"] == "greeting"
    assert data["headerTitle"] == "Password Reset Request"


def test_variables(client):
    names = [v["name"] for v in client.get("/email-templates/variables", params={"slug": "password-reset"}).json()["variables"]]
    assert names == ["userName", "resetUrl"]
    all_vars = client.get("/email-templates/variables").json()["variables"]
    assert all_vars[0]["label"] == "User Name"


def test_notification_type(client):
    assert client.get("/email-templates/notification-types/new_message").json() == {
        "type": "new_message", "slug": "new-message",
    }
    assert client.get("/email-templates/notification-types/unknown").status_code == 404


# ── Palette ──────────────────────────────────────────────────────────────────

def test_block_palette(client):
    blocks = client.get("/email-templates/blocks").json()["blocks"]
    assert len(blocks) == 12
    button = next(b for b in blocks if b["kind"] == "button")
    assert button["properties"]["color"][0] == "primary"
    assert button["properties"]["url"] is None


def test_create_block(client):
    data = client.post("/email-templates/blocks/amount-display").json()
    assert data["kind"] == "amount-display"
    assert data["content"] == "{{amount}}"
    assert data["properties"] == {"label": "", "style": "default"}
    assert data["id"].startswith("block-")


def test_create_block_unknown_kind(client):
    assert client.post("/email-templates/blocks/divider").status_code == 404

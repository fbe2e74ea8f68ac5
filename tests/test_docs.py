import json

from app.docs import write_openapi


def test_write_openapi(app, tmp_path):
    path = write_openapi(app, str(tmp_path / "swagger.json"))
    doc = json.loads(path.read_text(encoding="utf-8"))
    assert doc["info"]["title"] == "Contacts API"
    assert set(doc["paths"]) == {"/api/contacts", "/api/contacts/{contact_id}"}
    assert set(doc["paths"]["/api/contacts/{contact_id}"]) == {"get", "put", "delete"}
    assert "Contact" in doc["components"]["schemas"]

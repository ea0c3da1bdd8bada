"""Tests for the development REST backend (FastAPI + sqlite)."""

import json
import sqlite3

from config import get_database_file

PRODUCT = {
    "id": None,
    "name": "Warrior",
    "tagline": "Electric tractor",
    "price": "",
    "image_urls": '["https://img/1.png","https://img/2.png"]',
    "related_products_ids": "[3,1]",
    "specifications": json.dumps({"Battery": [{"parameter": "Capacity", "value": "20 kWh"}]}),
}


def test_product_round_trip(backend):
    created = backend.post("/api/products", json=PRODUCT)
    assert created.status_code == 201
    body = created.json()
    assert body["image_urls"] == ["https://img/1.png", "https://img/2.png"]
    assert body["related_products_ids"] == [3, 1]
    assert body["specifications"]["Battery"][0]["value"] == "20 kWh"
    assert body["price"] is None

    listed = backend.get("/api/products").json()
    assert [p["id"] for p in listed] == [body["id"]]


def test_product_update_and_delete(backend):
    product_id = backend.post("/api/products", json=PRODUCT).json()["id"]

    updated = backend.put(f"/api/products/{product_id}", json={**PRODUCT, "name": "Warrior 2", "price": 850000})
    assert updated.status_code == 200
    assert updated.json()["name"] == "Warrior 2"
    assert updated.json()["price"] == 850000

    assert backend.delete(f"/api/products/{product_id}").status_code == 204
    assert backend.get("/api/products").json() == []


def test_bad_json_field_is_rejected_with_error_envelope(backend):
    resp = backend.post("/api/products", json={**PRODUCT, "image_urls": "{not json"})
    assert resp.status_code == 422
    assert "image_urls" in resp.json()["error"]


def test_not_found_uses_error_envelope(backend):
    resp = backend.put("/api/qna/42", json={"question": "Q", "answer": "A"})
    assert resp.status_code == 404
    assert resp.json() == {"error": "Q&A not found"}
    assert backend.delete("/api/media/42").json() == {"error": "Media item not found"}


def test_qna_crud(backend):
    created = backend.post("/api/qna", json={"id": None, "question": "Range?", "answer": "80 km"}).json()
    assert created["question"] == "Range?"
    assert backend.get(f"/api/qna/{created['id']}").json()["answer"] == "80 km"


def test_request_defaults_to_pending(backend):
    resp = backend.post("/api/requests", json={
        "request_type": "demo", "full_name": "Asha", "email": "asha@example.com", "pan_number": None,
    })
    assert resp.status_code == 201
    assert resp.json()["status"] == "pending"
    assert resp.json()["quantity"] == 1

    bad = backend.post("/api/requests", json={"request_type": "quote", "full_name": "A", "email": "a@b.c"})
    assert bad.status_code == 422


def test_applications_live_under_apply(backend):
    created = backend.post("/api/apply", json={"name": "Ravi", "email": "ravi@example.com", "position": "Sales"})
    assert created.status_code == 201
    assert created.json()["created_at"]
    assert len(backend.get("/api/apply").json()) == 1


def test_subscribe_twice_conflicts(backend):
    assert backend.post("/api/subscribe", json={"email": "A@example.com"}).status_code == 201
    dup = backend.post("/api/subscribe", json={"email": "a@example.com"})
    assert dup.status_code == 409
    assert dup.json() == {"error": "Email already subscribed"}


def test_blogs_are_read_only(backend):
    conn = sqlite3.connect(get_database_file())
    conn.execute(
        "INSERT INTO blogs (title, slug, tags) VALUES (?, ?, ?)",
        ("Why electric", "why-electric", '["ev","farming"]'),
    )
    conn.commit()
    conn.close()

    blogs = backend.get("/api/blogs").json()
    assert blogs[0]["tags"] == ["ev", "farming"]
    assert backend.get(f"/api/blogs/{blogs[0]['id']}").json()["slug"] == "why-electric"
    assert backend.post("/api/blogs", json={"title": "x"}).status_code == 405


def test_list_fields_with_wrong_element_types_are_rejected(backend):
    for field, bad in (("related_products_ids", '["abc"]'), ("image_urls", "[1,2]"),
                       ("specifications", "[]")):
        resp = backend.post("/api/products", json={**PRODUCT, field: bad})
        assert resp.status_code == 422, field
        assert field in resp.json()["error"]

    product_id = backend.post("/api/products", json=PRODUCT).json()["id"]
    resp = backend.put(f"/api/products/{product_id}", json={**PRODUCT, "related_products_ids": '["abc"]'})
    assert resp.status_code == 422

    listed = backend.get("/api/products")
    assert listed.status_code == 200
    assert [p["related_products_ids"] for p in listed.json()] == [[3, 1]]


def test_numeric_id_strings_are_normalised(backend):
    body = backend.post("/api/products", json={**PRODUCT, "related_products_ids": '["4", 5]'}).json()
    assert body["related_products_ids"] == [4, 5]


def test_malformed_blog_tags_do_not_break_the_list(backend):
    conn = sqlite3.connect(get_database_file())
    conn.executemany(
        "INSERT INTO blogs (title, tags) VALUES (?, ?)",
        [("Broken", "not json"), ("Object", '{"a": 1}'), ("Fine", '["ev"]')],
    )
    conn.commit()
    conn.close()

    resp = backend.get("/api/blogs")
    assert resp.status_code == 200
    assert {b["title"]: b["tags"] for b in resp.json()} == {"Broken": [], "Object": [], "Fine": ["ev"]}

from structlog.testing import capture_logs


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_create_table_is_repeatable(client):
    r = client.post("/businesses/createBusinessesTable")
    assert r.status_code == 200, r.text
    assert r.json() == {}


def test_create_and_fetch_business(client, business_payload):
    r = client.post("/businesses", json=business_payload)
    assert r.status_code == 201, r.text
    business_id = r.json()["id"]

    r2 = client.get(f"/businesses/{business_id}")
    assert r2.status_code == 200, r2.text
    body = r2.json()
    assert body["id"] == business_id
    assert body["name"] == "Block 15"
    assert body["website"] == "http://block15.com"
    assert body["email"] is None
    assert body["reviews"] == []
    assert body["photos"] == []


def test_create_drops_undeclared_fields(client, business_payload):
    r = client.post("/businesses", json={**business_payload, "id": 999, "rating": 5})
    assert r.status_code == 201, r.text
    business_id = r.json()["id"]
    assert business_id != 999

    assert client.get("/businesses/999").status_code == 404
    body = client.get(f"/businesses/{business_id}").json()
    assert "rating" not in body


def test_create_missing_required_field(client, business_payload):
    payload = dict(business_payload)
    del payload["phone"]
    r = client.post("/businesses", json=payload)
    assert r.status_code == 400
    assert r.json() == {"error": "Request body is not a valid business object"}


def test_create_rejects_non_object_bodies(client, business_payload):
    for body in ([business_payload], "business", 42):
        r = client.post("/businesses", json=body)
        assert r.status_code == 400, body
        assert r.json()["error"] == "Request body is not a valid business object"

    r = client.post("/businesses")
    assert r.status_code == 400


def test_malformed_json_is_bad_request(client):
    r = client.post(
        "/businesses",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 400
    assert "error" in r.json()


def test_fetch_unknown_business(client):
    r = client.get("/businesses/12345")
    assert r.status_code == 404
    assert r.json() == {"error": "Requested business 12345 does not exist"}


def test_non_integer_id_is_bad_request(client):
    r = client.get("/businesses/abc")
    assert r.status_code == 400
    assert "business_id" in r.json()["error"]


def test_business_detail_embeds_reviews_and_photos(client, create_business):
    business_id = create_business()
    other_id = create_business(name="Interzone")

    r = client.post("/reviews", json={"userid": 7, "businessid": business_id, "dollars": 2, "stars": 4})
    assert r.status_code == 201, r.text
    client.post("/reviews", json={"userid": 7, "businessid": other_id, "dollars": 1, "stars": 5})
    r = client.post("/photos", json={"userid": 7, "businessid": business_id, "caption": "Tap list"})
    assert r.status_code == 201, r.text

    body = client.get(f"/businesses/{business_id}").json()
    assert [rv["stars"] for rv in body["reviews"]] == [4]
    assert body["reviews"][0]["review"] is None
    assert [p["caption"] for p in body["photos"]] == ["Tap list"]


def test_list_empty(client):
    r = client.get("/businesses")
    assert r.status_code == 200, r.text
    assert r.json() == {
        "businesses": [],
        "page": 1,
        "totalPages": 0,
        "pageSize": 10,
        "count": 0,
    }


def test_list_pagination(client, create_business):
    ids = [create_business(name=f"Shop {i}") for i in range(12)]

    first = client.get("/businesses").json()
    assert first["count"] == 12
    assert first["totalPages"] == 2
    assert first["pageSize"] == 10
    assert first["page"] == 1
    assert [b["id"] for b in first["businesses"]] == ids[:10]

    second = client.get("/businesses", params={"page": 2}).json()
    assert second["page"] == 2
    assert [b["id"] for b in second["businesses"]] == ids[10:]


def test_list_page_is_clamped(client, create_business):
    for i in range(12):
        create_business(name=f"Shop {i}")

    assert client.get("/businesses", params={"page": 99}).json()["page"] == 2
    assert client.get("/businesses", params={"page": -3}).json()["page"] == 1
    assert client.get("/businesses", params={"page": 0}).json()["page"] == 1
    assert client.get("/businesses", params={"page": "abc"}).json()["page"] == 1
    assert client.get("/businesses", params={"page": "2abc"}).json()["page"] == 2
    assert client.get("/businesses", params={"page": " 2"}).json()["page"] == 2


def test_replace_business(client, create_business, business_payload):
    business_id = create_business()

    r = client.put(f"/businesses/{business_id}", json={**business_payload, "name": "Block 16"})
    assert r.status_code == 200, r.text
    assert r.json() == {
        "id": business_id,
        "links": {"business": f"/businesses/{business_id}"},
    }
    assert client.get(f"/businesses/{business_id}").json()["name"] == "Block 16"


def test_replace_requires_valid_body(client, create_business):
    business_id = create_business()
    r = client.put(f"/businesses/{business_id}", json={"name": "Only a name"})
    assert r.status_code == 400
    assert r.json()["error"] == "Request body is not a valid business object"


def test_replace_unknown_business(client, business_payload):
    r = client.put("/businesses/404", json=business_payload)
    assert r.status_code == 404


def test_delete_business(client, create_business):
    business_id = create_business()

    r = client.delete(f"/businesses/{business_id}")
    assert r.status_code == 204
    assert r.content == b""

    assert client.get(f"/businesses/{business_id}").status_code == 404
    assert client.delete(f"/businesses/{business_id}").status_code == 404


def test_database_failure_maps_to_500(bare_client, business_payload):
    r = bare_client.get("/businesses")
    assert r.status_code == 500
    assert r.json() == {"error": "Error fetching businesses list. Try again later."}

    r = bare_client.post("/businesses", json=business_payload)
    assert r.status_code == 500
    assert r.json() == {"error": "Error inserting business into DB"}


def test_unknown_route(client):
    r = client.get("/owners")
    assert r.status_code == 404
    assert r.json() == {"error": "Not Found"}


def test_replace_drops_undeclared_fields(client, create_business, business_payload):
    business_id = create_business()

    r = client.put(
        f"/businesses/{business_id}",
        json={**business_payload, "name": "Block 16", "id": 777, "rating": 5},
    )
    assert r.status_code == 200, r.text
    assert r.json()["id"] == business_id

    body = client.get(f"/businesses/{business_id}").json()
    assert body["id"] == business_id
    assert body["name"] == "Block 16"
    assert "rating" not in body
    assert client.get("/businesses/777").status_code == 404


def test_not_found_is_logged_with_resource(client):
    with capture_logs() as logs:
        r = client.get("/businesses/12345")
    assert r.status_code == 404

    rejected = [entry for entry in logs if entry["event"] == "Request rejected"]
    assert rejected, logs
    assert rejected[0]["resource"] == "businesses"
    assert rejected[0]["resource_id"] == 12345
    assert rejected[0]["status_code"] == 404


def test_unhandled_driver_error_renders_json(server_error_client):
    r = server_error_client.get("/businesses/99999999999999999999")
    assert r.status_code == 500
    assert r.headers["content-type"].startswith("application/json")
    assert r.json() == {"error": "Internal server error"}


def test_row_that_does_not_fit_response_renders_json(server_error_client, business_payload):
    # SQLite stores the text as-is despite the integer column
    r = server_error_client.post("/businesses", json={**business_payload, "ownerid": "abc"})
    assert r.status_code == 201, r.text

    r2 = server_error_client.get(f"/businesses/{r.json()['id']}")
    assert r2.status_code == 500
    assert r2.json() == {"error": "Internal server error"}

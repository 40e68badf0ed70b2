import pytest

from business_api.repositories import reviews as review_repository


@pytest.fixture()
def review_payload(create_business):
    return {"userid": 7, "businessid": create_business(), "dollars": 2, "stars": 4, "review": "Solid."}


def test_create_and_fetch_review(client, review_payload):
    r = client.post("/reviews", json=review_payload)
    assert r.status_code == 201, r.text
    review_id = r.json()["id"]

    r2 = client.get(f"/reviews/{review_id}")
    assert r2.status_code == 200, r2.text
    assert r2.json() == {"id": review_id, **review_payload}


def test_optional_review_text(client, review_payload):
    payload = dict(review_payload)
    del payload["review"]
    r = client.post("/reviews", json=payload)
    assert r.status_code == 201, r.text
    assert client.get(f"/reviews/{r.json()['id']}").json()["review"] is None


def test_user_can_review_business_only_once(client, review_payload):
    assert client.post("/reviews", json=review_payload).status_code == 201

    r = client.post("/reviews", json={**review_payload, "stars": 1})
    assert r.status_code == 403
    assert r.json() == {"error": "User has already posted a review of this business"}

    other_user = client.post("/reviews", json={**review_payload, "userid": 8})
    assert other_user.status_code == 201


def test_create_invalid_review(client, review_payload):
    payload = dict(review_payload)
    del payload["stars"]
    r = client.post("/reviews", json=payload)
    assert r.status_code == 400
    assert r.json() == {"error": "Request body is not a valid review object"}


def test_replace_review(client, review_payload):
    review_id = client.post("/reviews", json=review_payload).json()["id"]

    r = client.put(f"/reviews/{review_id}", json={**review_payload, "stars": 2, "review": None})
    assert r.status_code == 200, r.text
    assert r.json() == {"id": review_id, "links": {"review": f"/reviews/{review_id}"}}

    body = client.get(f"/reviews/{review_id}").json()
    assert body["stars"] == 2
    assert body["review"] is None


def test_replace_review_validation_and_missing(client, review_payload):
    review_id = client.post("/reviews", json=review_payload).json()["id"]

    r = client.put(f"/reviews/{review_id}", json={"stars": 3})
    assert r.status_code == 400

    r = client.put("/reviews/999", json=review_payload)
    assert r.status_code == 404
    assert r.json() == {"error": "Requested review 999 does not exist"}


def test_delete_review(client, review_payload):
    review_id = client.post("/reviews", json=review_payload).json()["id"]

    assert client.delete(f"/reviews/{review_id}").status_code == 204
    assert client.get(f"/reviews/{review_id}").status_code == 404
    assert client.delete(f"/reviews/{review_id}").status_code == 404

    # the user may review the business again once the old review is gone
    assert client.post("/reviews", json=review_payload).status_code == 201


def test_review_table_missing(bare_client):
    r = bare_client.get("/reviews/1")
    assert r.status_code == 500
    assert r.json() == {"error": "Error fetching review"}


def test_replace_review_drops_undeclared_fields(client, review_payload):
    review_id = client.post("/reviews", json=review_payload).json()["id"]

    r = client.put(f"/reviews/{review_id}", json={**review_payload, "stars": 1, "id": 777, "rating": 5})
    assert r.status_code == 200, r.text

    body = client.get(f"/reviews/{review_id}").json()
    assert body == {"id": review_id, **review_payload, "stars": 1}
    assert client.get("/reviews/777").status_code == 404


def test_concurrent_duplicate_review_is_rejected(client, review_payload, monkeypatch):
    assert client.post("/reviews", json=review_payload).status_code == 201

    real_count = review_repository.count_user_reviews_of_business
    calls = []

    async def count_missing_the_first_insert(db, **kwargs):
        # the first lookup runs before the competing insert commits
        calls.append(kwargs)
        if len(calls) == 1:
            return 0
        return await real_count(db, **kwargs)

    monkeypatch.setattr(review_repository, "count_user_reviews_of_business", count_missing_the_first_insert)

    r = client.post("/reviews", json={**review_payload, "stars": 1})
    assert r.status_code == 403, r.text
    assert r.json() == {"error": "User has already posted a review of this business"}
    assert len(calls) == 2


def test_replace_onto_existing_user_business_pair(client, review_payload):
    client.post("/reviews", json=review_payload)
    other_id = client.post("/reviews", json={**review_payload, "userid": 8}).json()["id"]

    r = client.put(f"/reviews/{other_id}", json=review_payload)
    assert r.status_code == 403, r.text
    assert client.get(f"/reviews/{other_id}").json()["userid"] == 8


def test_null_required_value_is_not_a_duplicate(client, review_payload):
    r = client.post("/reviews", json={**review_payload, "stars": None})
    assert r.status_code == 500
    assert r.json() == {"error": "Error inserting review into database"}

    review_id = client.post("/reviews", json=review_payload).json()["id"]
    r = client.put(f"/reviews/{review_id}", json={**review_payload, "stars": None})
    assert r.status_code == 500
    assert r.json() == {"error": "Unable to update review"}

import json
import pytest

def test_list_starts_empty(client):
    res = client.get("/dishes")
    assert res.status_code == 200
    assert res.json() == {"data": []}

def test_create_dish(client, taco):
    res = client.post("/dishes", json={"data": taco})
    assert res.status_code == 201
    assert res.json()["data"] == {"id": "id-1", **taco}

def test_created_dish_reads_back(client, taco):
    dish_id = client.post("/dishes", json={"data": taco}).json()["data"]["id"]
    res = client.get(f"/dishes/{dish_id}")
    assert res.status_code == 200
    assert res.json() == {"data": {"id": dish_id, **taco}}
    assert client.get("/dishes").json()["data"] == [{"id": dish_id, **taco}]

def test_create_ignores_client_id_and_extra_fields(client, taco):
    res = client.post("/dishes", json={"data": {**taco, "id": "mine", "spice": "hot"}})
    assert res.status_code == 201
    assert res.json()["data"] == {"id": "id-1", **taco}

@pytest.mark.parametrize("field, message", [
    ("name", "Dish must include a name"),
    ("description", "Dish must include a description"),
    ("image_url", "Dish must include an image_url"),
    ("price", "Dish must have a price that is a positive number"),
])
def test_create_missing_field(client, taco, field, message):
    del taco[field]
    res = client.post("/dishes", json={"data": taco})
    assert res.status_code == 400
    assert res.json() == {"error": message}

@pytest.mark.parametrize("price", [0, -1, "5", None, True, [5]])
def test_create_bad_price(client, taco, price):
    res = client.post("/dishes", json={"data": {**taco, "price": price}})
    assert res.status_code == 400
    assert res.json() == {"error": "Dish must have a price that is a positive number"}
    assert client.get("/dishes").json()["data"] == []

def test_create_empty_name_reported_first(client):
    res = client.post("/dishes", json={"data": {"name": "", "description": "", "price": -1}})
    assert res.json() == {"error": "Dish must include a name"}

def test_create_without_data_envelope(client, taco):
    res = client.post("/dishes", json=taco)
    assert res.status_code == 400
    assert res.json() == {"error": "Dish must include a name"}

def test_create_without_body(client):
    res = client.post("/dishes")
    assert res.status_code == 400
    assert res.json() == {"error": "Dish must include a name"}

def test_read_missing_dish(client):
    res = client.get("/dishes/nope")
    assert res.status_code == 404
    assert res.json() == {"error": "Dish id not found: nope"}

def test_update_dish(client, taco):
    dish_id = client.post("/dishes", json={"data": taco}).json()["data"]["id"]
    changes = {"name": "Burrito", "description": "Big", "price": 7.5, "image_url": "http://y"}
    res = client.put(f"/dishes/{dish_id}", json={"data": {"id": dish_id, **changes}})
    assert res.status_code == 200
    assert res.json()["data"] == {"id": dish_id, **changes}
    assert client.get(f"/dishes/{dish_id}").json()["data"] == {"id": dish_id, **changes}

def test_update_without_body_id(client, taco):
    dish_id = client.post("/dishes", json={"data": taco}).json()["data"]["id"]
    res = client.put(f"/dishes/{dish_id}", json={"data": {**taco, "name": "Nacho"}})
    assert res.status_code == 200
    assert res.json()["data"]["id"] == dish_id
    assert res.json()["data"]["name"] == "Nacho"

def test_update_id_mismatch_checked_before_fields(client, taco):
    dish_id = client.post("/dishes", json={"data": taco}).json()["data"]["id"]
    res = client.put(f"/dishes/{dish_id}", json={"data": {"id": "other"}})
    assert res.status_code == 400
    assert res.json() == {"error": f"Dish id in the body (other) does not match dish id in the route ({dish_id})"}

def test_update_missing_dish_checked_first(client):
    res = client.put("/dishes/nope", json={"data": {"id": "other"}})
    assert res.status_code == 404
    assert res.json() == {"error": "Dish id not found: nope"}

def test_update_invalid_fields_leave_dish_unchanged(client, taco):
    dish_id = client.post("/dishes", json={"data": taco}).json()["data"]["id"]
    res = client.put(f"/dishes/{dish_id}", json={"data": {**taco, "price": 0}})
    assert res.status_code == 400
    assert client.get(f"/dishes/{dish_id}").json()["data"] == {"id": dish_id, **taco}

def test_dishes_cannot_be_deleted(client, taco):
    dish_id = client.post("/dishes", json={"data": taco}).json()["data"]["id"]
    res = client.delete(f"/dishes/{dish_id}")
    assert res.status_code == 405
    assert res.json() == {"error": f"DELETE not allowed for /dishes/{dish_id}"}

def test_lone_surrogate_text_rejected(client, taco):
    body = json.dumps({"data": {**taco, "name": "\ud800"}})
    res = client.post("/dishes", content=body, headers={"content-type": "application/json"})
    assert res.status_code == 400
    assert res.json() == {"error": "Dish must include a name"}
    assert client.get("/dishes").json()["data"] == []

@pytest.mark.parametrize("body_id", [[], {}])
def test_update_empty_container_id_mismatch(client, taco, body_id):
    dish_id = client.post("/dishes", json={"data": taco}).json()["data"]["id"]
    res = client.put(f"/dishes/{dish_id}", json={"data": {**taco, "id": body_id}})
    assert res.status_code == 400
    assert res.json()["error"].startswith("Dish id in the body (")

@pytest.mark.parametrize("body_id", [None, "", 0, False])
def test_update_blank_body_id_ignored(client, taco, body_id):
    dish_id = client.post("/dishes", json={"data": taco}).json()["data"]["id"]
    res = client.put(f"/dishes/{dish_id}", json={"data": {**taco, "id": body_id}})
    assert res.status_code == 200

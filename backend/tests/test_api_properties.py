def test_list_properties_unfiltered(client):
    response = client.get("/v1/properties")
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 5
    assert data["shown"] == 5
    assert [item["id"] for item in data["items"]] == ["1", "2", "3", "4", "5"]
    assert data["empty_state"] is None
    assert data["filters"] == {"query": "", "categorical": {"type": "all", "status": "all"}}


def test_list_properties_query_river(client):
    data = client.get("/v1/properties", params={"q": "river"}).json()
    assert [item["name"] for item in data["items"]] == ["Riverside Condos"]
    assert data["shown"] == 1
    assert data["total"] == 5


def test_list_properties_combined_filters(client):
    data = client.get("/v1/properties", params={"q": "spring", "type": "townhouse"}).json()
    assert [item["name"] for item in data["items"]] == ["Maple Street Townhomes"]

    data = client.get("/v1/properties", params={"status": "maintenance"}).json()
    assert [item["name"] for item in data["items"]] == ["Downtown Lofts"]


def test_list_item_shape(client):
    item = client.get("/v1/properties", params={"q": "oakwood"}).json()["items"][0]
    assert item["address_line"] == "1200 Oakwood Drive, Springfield, IL 62704"
    assert item["occupancy_rate"] == 83
    assert item["detail_url"] == "/property/1"
    assert item["image"].startswith("https://")


def test_property_without_images_uses_placeholder(client):
    item = client.get("/v1/properties", params={"q": "maple"}).json()["items"][0]
    assert item["image"] == "/placeholder.svg"
    assert item["occupancy_rate"] == 0


def test_empty_result_offers_reset(client):
    data = client.get("/v1/properties", params={"q": "atlantis", "type": "condo"}).json()
    assert data["items"] == []
    assert data["shown"] == 0
    empty = data["empty_state"]
    assert empty["message"] == "No properties found matching your criteria."
    assert empty["reset_filters"] == {"query": "", "categorical": {"type": "all", "status": "all"}}
    assert empty["reset_url"] == "/properties"

    reset = client.get("/v1/properties", params={"q": "", "type": "all", "status": "all"}).json()
    assert reset["shown"] == reset["total"] == 5


def test_unknown_filter_value_rejected(client):
    response = client.get("/v1/properties", params={"type": "castle"})
    assert response.status_code == 422


def test_options_for_selects(client):
    options = client.get("/v1/properties").json()["options"]
    assert [o["value"] for o in options["type"]] == [
        "all", "apartment", "house", "condo", "townhouse", "commercial",
    ]
    assert options["status"][0]["label"] == "All Statuses"


def test_property_detail(client):
    response = client.get("/v1/properties/1")
    assert response.status_code == 200
    data = response.json()
    assert data["record"]["name"] == "Oakwood Apartments"
    assert data["full_address"].endswith(", USA")
    assert [u["number"] for u in data["units"]] == ["101", "102"]
    assert data["manager"]["name"] == "Sarah Johnson"
    assert data["back_url"] == "/properties"


def test_property_detail_omits_unresolvable_manager(client):
    data = client.get("/v1/properties/5").json()
    assert data["manager"] is None
    assert data["units"] == []


def test_property_detail_not_found(client):
    response = client.get("/v1/properties/404")
    assert response.status_code == 404
    assert response.json() == {"detail": "Property not found"}


def test_submit_property(client):
    payload = {
        "name": "Cedar Court",
        "street": "10 Cedar Court",
        "city": "Springfield",
        "state": "IL",
        "zip_code": "62704",
        "type": "house",
        "total_units": 1,
        "amenities": "Garage",
    }
    response = client.post("/v1/properties", json=payload)
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["record"]["amenities"] == ["Garage"]

    # Never persisted
    assert client.get("/v1/properties").json()["total"] == 5


def test_submit_property_validation_message(client):
    response = client.post("/v1/properties", json={"name": "Cedar Court"})
    assert response.status_code == 400
    assert response.json() == {"detail": "Street address is required"}


def test_submit_property_unknown_type_is_schema_error(client):
    response = client.post("/v1/properties", json={"name": "X", "type": "castle"})
    assert response.status_code == 422

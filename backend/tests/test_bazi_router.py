"""Integration tests for the /v1/bazi router."""

VALID_PAYLOAD = {"birth_date": "2000-03-15", "birth_hour": 14}


def test_chart_returns_four_pillars(client):
    resp = client.post("/v1/bazi/chart", json=VALID_PAYLOAD)
    assert resp.status_code == 200
    data = resp.json()
    assert data["year_pillar"] == {"stem": "geng", "branch": "chen"}
    assert data["month_pillar"] == {"stem": "ji", "branch": "mao"}
    assert data["day_pillar"] == {"stem": "wu", "branch": "xu"}
    assert data["hour_pillar"] == {"stem": "ji", "branch": "wei"}
    assert data["day_master"] == "wu"
    assert data["element"] == "earth"


def test_chart_without_hour(client):
    resp = client.post("/v1/bazi/chart", json={"birth_date": "1990-01-01"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["hour_pillar"] is None
    assert data["year_pillar"] == {"stem": "ji", "branch": "si"}


def test_chart_unknown_time_drops_hour(client):
    resp = client.post(
        "/v1/bazi/chart",
        json={"birth_date": "2000-03-15", "birth_hour": 14, "birth_time_unknown": True},
    )
    assert resp.status_code == 200
    assert resp.json()["hour_pillar"] is None


def test_analysis_payload(client):
    resp = client.post("/v1/bazi/analysis", json=VALID_PAYLOAD)
    assert resp.status_code == 200
    data = resp.json()

    assert set(data.keys()) == {"chart", "pillars", "element_profile", "interactions"}
    assert data["pillars"]["hour"]["hour_window"] == [13, 15]
    assert data["pillars"]["day"]["stem_element"] == "earth"
    assert data["element_profile"]["primary_element"] == "earth"
    assert data["element_profile"]["conflicting_element"] == "wood"

    interactions = data["interactions"]
    assert len(interactions) == 6
    assert interactions[0]["from"] == "year_metal"
    assert interactions[0]["to"] == "month_earth"
    assert all(item["type"] != "neutral" for item in interactions)


def test_analysis_without_hour_has_three_pairs_at_most(client):
    resp = client.post("/v1/bazi/analysis", json={"birth_date": "1990-01-01"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["pillars"]["hour"] is None
    assert [item["type"] for item in data["interactions"]] == ["weakening", "controlling", "overacting"]


def test_compat_relation(client):
    resp = client.post(
        "/v1/bazi/compat",
        json={
            "person_1": {"birth_date": "2000-03-15", "birth_hour": 14},
            "person_2": {"birth_date": "1990-01-01"},
        },
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["element_1"] == "earth"
    assert data["element_2"] == "water"
    assert data["relation"] == {
        "type": "controlling",
        "strength": "strong",
        "description": "earth controls water",
    }

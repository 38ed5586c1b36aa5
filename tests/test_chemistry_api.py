from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def _mix(**overrides):
    payload = {
        "chemical_a": "NaOH",
        "volume_a": 100,
        "chemical_b": "H2SO4",
        "volume_b": 50,
        "reaction_id": "acidBase1",
    }
    payload.update(overrides)
    return client.post("/chemistry/mix", json=payload)


def test_list_catalog():
    chems = client.get("/chemistry/chemicals").json()
    assert {c["id"] for c in chems} >= {"H2SO4", "NaOH", "HCl", "NH3"}
    reactions = client.get("/chemistry/reactions").json()
    assert {r["id"] for r in reactions} >= {"acidBase1", "acidBase2"}


def test_reaction_detail():
    r = client.get("/chemistry/reactions/acidBase2")
    assert r.status_code == 200
    assert r.json()["correct_ratio"] == [1, 1]


def test_reaction_detail_404():
    assert client.get("/chemistry/reactions/missing").status_code == 404


def test_optimal_volumes():
    r = client.get("/chemistry/reactions/acidBase1/optimal-volumes", params={"total_volume": 90})
    assert r.status_code == 200
    body = r.json()
    assert body["volume_a"] == 30 and body["volume_b"] == 60
    assert body["hint"] == "Try approximately 30mL : 60mL ratio"


def test_mix_success_records_attempt():
    r = _mix(session_id="lab-1")
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True and body["score_earned"] == 100
    assert body["result_chemical"]["formula"] == "Na₂SO₄ + H₂O"
    assert isinstance(body["attempt_id"], int)

    rec = client.get(f"/attempts/{body['attempt_id']}").json()
    assert rec["game"] == "chemistry"
    assert rec["correct"] == 1 and rec["score"] == 100


def test_mix_wrong_ratio():
    body = _mix(volume_a=130).json()
    assert body["success"] is False
    assert body["score_earned"] == 44
    assert body["result_chemical"]["name"] == "Incomplete Mixture"


def test_mix_non_reacting_pair():
    body = _mix(chemical_a="HCl").json()
    assert body["success"] is False and body["score_earned"] == 0
    assert body["result_chemical"] is None


def test_mix_unknown_ids():
    assert _mix(chemical_a="Unobtainium").status_code == 404
    assert _mix(reaction_id="nope").status_code == 404


def test_mix_rejects_non_positive_volume():
    assert _mix(volume_b=0).status_code == 422
    assert _mix(volume_a=-5).status_code == 422

"""
HTTP API via FastAPI TestClient.
"""

from fastapi.testclient import TestClient

from neuro_pathways.main import app


client = TestClient(app)


def new_session(inputs: dict = None) -> str:
    body = {"inputs": inputs} if inputs else {}
    resp = client.post("/evt/session", json=body)
    assert resp.status_code == 200
    return resp.json()["session_id"]


def update(session_id: str, field: str, value):
    return client.post("/evt/update", json={"session_id": session_id, "field": field, "value": value})


def test_checker():
    resp = client.get("/checker")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_create_session_defaults():
    resp = client.post("/evt/session")
    assert resp.status_code == 200
    body = resp.json()
    assert body["active_section"] == 1
    assert body["inputs"]["occlusionType"] == "unknown"


def test_wizard_flow_to_eligible(capsys):
    sid = new_session()

    resp = update(sid, "occlusionType", "lvo")
    assert resp.status_code == 200
    assert resp.json()["data"]["focus"]["next_field"] == "lvoLocation"
    assert resp.json()["session_id"] == sid

    for field, value in (
        ("lvoLocation", "anterior"),
        ("lvo", "yes"),
        ("mrs", "yes"),
        ("age", "18_79"),
        ("time", "0_6"),
        ("nihss", "10_19"),
        ("aspects", "8"),
    ):
        resp = update(sid, field, value)
        assert resp.status_code == 200

    result = resp.json()["data"]["result"]
    assert result["status"] == "Eligible"
    assert result["criteriaName"] == "Standard Early Window - Class I"
    assert "[Analytics] status=Eligible" in capsys.readouterr().out

    note = client.get(f"/evt/note/{sid}").json()
    assert note["note"].startswith("LVO EVT Assessment")
    assert "- ASPECTS: 8" in note["note"]


def test_update_derives_mismatch_ratio():
    sid = new_session({"occlusionType": "lvo", "time": "6_24"})
    update(sid, "core", "30")
    resp = update(sid, "mismatchVol", "30")
    assert resp.json()["data"]["inputs"]["mismatchRatio"] == "2.0"


def test_update_rejects_bad_input():
    sid = new_session()
    assert update(sid, "time", "tomorrow").status_code == 400
    assert update(sid, "pulse", "80").status_code == 400
    resp = client.post("/evt/update", json={"session_id": sid})
    assert resp.status_code == 400


def test_malformed_identifiers_are_400():
    sid = new_session()
    assert client.post("/evt/update", json={"session_id": sid, "field": {"a": 1}, "value": "x"}).status_code == 400
    assert client.post("/evt/update", json={"session_id": [sid], "field": "time", "value": "0_6"}).status_code == 400
    assert client.post("/evt/reset", json={"session_id": ["x"]}).status_code == 400
    assert client.post("/evt/section", json={"session_id": sid, "action": ["next"]}).status_code == 400
    assert client.post("/evt/evaluate", json={"answered_field": ["aspects"]}).status_code == 400


def test_non_finite_section_is_400():
    sid = new_session()
    headers = {"content-type": "application/json"}
    resp = client.post("/evt/evaluate", content='{"active_section": Infinity}', headers=headers)
    assert resp.status_code == 400
    resp = client.post(
        "/evt/section",
        content='{"session_id": "%s", "action": "goto", "section": NaN}' % sid,
        headers=headers,
    )
    assert resp.status_code == 400


def test_unknown_session_is_404():
    assert update("missing", "time", "0_6").status_code == 404
    assert client.get("/evt/note/missing").status_code == 404
    assert client.post("/evt/reset", json={"session_id": "missing"}).status_code == 404


def test_section_navigation():
    sid = new_session()
    resp = client.post("/evt/section", json={"session_id": sid, "action": "next"})
    assert resp.json()["data"]["progress"]["active_section"] == 2
    resp = client.post("/evt/section", json={"session_id": sid, "action": "goto", "section": 4})
    assert resp.json()["data"]["progress"]["active_section"] == 4
    resp = client.post("/evt/section", json={"session_id": sid, "action": "next"})
    assert resp.json()["data"]["progress"]["active_section"] == 4
    resp = client.post("/evt/section", json={"session_id": sid, "action": "back"})
    assert resp.json()["data"]["progress"]["active_section"] == 3

    bad = client.post("/evt/section", json={"session_id": sid, "action": "sideways"})
    assert bad.status_code == 400


def test_reset_clears_session():
    sid = new_session({"occlusionType": "mevo", "mevoLocation": "distal"})
    client.post("/evt/section", json={"session_id": sid, "action": "next"})
    resp = client.post("/evt/reset", json={"session_id": sid})
    data = resp.json()["data"]
    assert data["inputs"]["occlusionType"] == "unknown"
    assert data["progress"]["active_section"] == 1
    assert data["result"] is None
    assert client.get(f"/evt/note/{sid}").json()["note"] == ""


def test_stateless_evaluate():
    resp = client.post("/evt/evaluate", json={
        "inputs": {
            "occlusionType": "mevo",
            "mevoLocation": "distal",
            "mevoDependent": "no",
            "nihssNumeric": "8",
            "mevoDisabling": "yes",
            "mevoSalvageable": "yes",
            "mevoTechnical": "yes",
        },
        "answered_field": "mevoTechnical",
        "active_section": 3,
    })
    assert resp.status_code == 200
    body = resp.json()
    assert body["data"]["result"]["status"] == "Avoid EVT"
    assert body["data"]["result"]["criteriaName"] == "Class III: No Benefit"
    assert body["data"]["focus"] == {"next_field": None, "is_last": True}

    bad = client.post("/evt/evaluate", json={"inputs": {"occlusionType": "carotid"}})
    assert bad.status_code == 400

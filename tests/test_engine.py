"""
EvtPathwayEngine contract.
"""

import asyncio

from neuro_pathways.engines.contracts import make_pathway_input, result_status
from neuro_pathways.engines.evt_pathway_engine.engine import EvtPathwayEngine
from neuro_pathways.engines.evt_pathway_engine.field_resolver import Section
from neuro_pathways.engines.evt_pathway_engine.models import InputState


LATE_CASE = {
    "occlusionType": "lvo",
    "lvoLocation": "anterior",
    "lvo": "yes",
    "mrs": "yes",
    "age": "18_79",
    "time": "6_24",
    "nihss": "10_19",
    "aspects": "7",
}


def run(input_data: dict) -> dict:
    return asyncio.run(EvtPathwayEngine().run(input_data, {}))


def test_complete_case_contract():
    out = run({"inputs": LATE_CASE, "answered_field": "aspects", "active_section": 3})

    assert out["status"] == "complete"
    assert out["engine"] == "evt_pathway_engine"
    assert out["result_type"] == "evt_pathway"
    assert out["classification"] == {"intent_type": "evt_pathway"}
    assert out["confidence"] == 1.0

    data = out["data"]
    assert data["result"]["status"] == "Eligible"
    assert data["result"]["criteriaName"] == "Late Window ASPECTS ≥ 6 - Class I"
    assert data["result"]["relevantTrials"] == ["DAWN", "DEFUSE-3"]
    assert data["focus"] == {"next_field": "core", "is_last": False}
    assert data["branch"]["fields"] == ["aspects", "core", "mismatchVol", "mismatchRatio"]
    assert data["branch"]["time"] == "6_24"
    assert data["inputs"]["aspects"] == "7"

    progress = data["progress"]
    assert progress["active_section"] == 3
    assert progress["completed"] == 4
    assert progress["total"] == 4
    assert [s["name"] for s in progress["sections"]] == ["triage", "clinical", "imaging", "decision"]


def test_no_occlusion_type_needs_clarification():
    out = run({"inputs": {}})
    assert out["status"] == "needs_clarification"
    assert out["data"]["result"] is None
    assert out["data"]["progress"]["active_section"] == 1
    assert out["data"]["focus"] == {"next_field": None, "is_last": False}


def test_incomplete_result_needs_clarification():
    out = run({"inputs": {"occlusionType": "lvo", "lvoLocation": "anterior"},
               "answered_field": "lvoLocation", "active_section": 1})
    assert out["status"] == "needs_clarification"
    assert out["data"]["result"]["status"] == "Incomplete"
    assert out["data"]["focus"]["next_field"] == "lvo"


def test_mevo_without_location_needs_clarification():
    out = run({"inputs": {"occlusionType": "mevo"}})
    assert out["status"] == "needs_clarification"
    assert out["confidence"] == 0.0
    assert out["data"]["result"]["status"] == "BMT Preferred"

    out = run({"inputs": {"occlusionType": "mevo", "mevoLocation": "aca"}})
    assert out["status"] == "complete"


def test_invalid_inputs_return_error_contract():
    out = run({"inputs": {"time": "yesterday"}})
    assert out["status"] == "error"
    assert out["data"]["field"] == "time"
    assert "yesterday" in out["data"]["error"]

    out = run({"inputs": {}, "answered_field": "heartRate"})
    assert out["status"] == "error"
    assert out["data"]["field"] == "heartRate"

    out = run({"inputs": {}, "active_section": "imaging"})
    assert out["status"] == "error"


def test_malformed_field_and_section_return_error_contract():
    out = run({"inputs": {}, "answered_field": ["aspects"]})
    assert out["status"] == "error"
    assert out["data"]["field"] == ["aspects"]

    for section in (float("inf"), float("nan"), {"n": 2}):
        out = run({"inputs": LATE_CASE, "active_section": section})
        assert out["status"] == "error"


def test_section_is_clamped():
    out = run({"inputs": LATE_CASE, "active_section": 12})
    assert out["data"]["progress"]["active_section"] == 4
    out = run({"inputs": LATE_CASE, "active_section": "2"})
    assert out["data"]["progress"]["active_section"] == 2


def test_evaluate_is_synchronous_and_pure():
    engine = EvtPathwayEngine()
    state = InputState.from_dict(LATE_CASE)
    first = engine.evaluate(state, "aspects", Section.IMAGING)
    second = engine.evaluate(state, "aspects", Section.IMAGING)
    assert first == second


def test_input_envelope_and_status_helper():
    envelope = make_pathway_input()
    assert envelope == {"inputs": {}, "answered_field": None, "active_section": None}

    out = run(make_pathway_input(inputs=LATE_CASE, active_section=3))
    assert result_status(out) == "Eligible"
    assert result_status(run(make_pathway_input())) is None

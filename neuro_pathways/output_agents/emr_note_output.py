"""
EMR Note Output

Formats an EVT pathway result into the plain-text assessment block that
clinicians paste into the EMR. Deterministic; no LLM involved.
"""

from typing import Optional

from neuro_pathways.engines.evt_pathway_engine.models import (
    InputState,
    LvoLocation,
    OcclusionType,
    PathwayResult,
    TimeWindow,
)
from neuro_pathways.engines.evt_pathway_engine.progress import bucket_label, time_label


def _window(time: TimeWindow) -> str:
    return time_label(time) or "unknown"


def _imaging_lines(state: InputState) -> str:
    if state.lvo_location == LvoLocation.BASILAR:
        return f"- pc-ASPECTS: {state.pc_aspects}"
    if state.time == TimeWindow.EARLY:
        return f"- ASPECTS: {state.aspects}"

    lines = []
    if state.aspects:
        lines.append(f"- ASPECTS: {state.aspects}")
    if state.core:
        lines.append(f"- Core: {state.core}ml")
    if state.mismatch_vol:
        lines.append(f"- Mismatch: {state.mismatch_vol}ml | Ratio: {state.mismatch_ratio}")
    return "\n".join(lines)


def _lvo_note(state: InputState, result: PathwayResult) -> str:
    vessel = "Basilar" if state.lvo_location == LvoLocation.BASILAR else "Anterior"
    return (
        f"LVO EVT Assessment\n"
        f"Type: {vessel}\n"
        f"Status: {result.status.value.upper()}\n"
        f"Protocol: {result.criteria_name or 'Standard Screening'}\n"
        f"\n"
        f"Clinical Data:\n"
        f"- Time Window: {_window(state.time)}\n"
        f"- NIHSS: {bucket_label(state.nihss.value)}\n"
        f"- Age: {bucket_label(state.age.value)}\n"
        f"\n"
        f"Imaging Data:\n"
        f"{_imaging_lines(state)}\n"
        f"\n"
        f"Reason: {result.reason}\n"
        f"{result.details}"
    )


def _mevo_note(state: InputState, result: PathwayResult) -> str:
    location = state.mevo_location.value.replace("_", " ", 1).upper()
    return (
        f"MeVO EVT Assessment\n"
        f"Status: {result.status.value.upper()}\n"
        f"Reason: {result.reason}\n"
        f"\n"
        f"Clinical Data:\n"
        f"- Location: {location}\n"
        f"- NIHSS: {state.nihss_numeric}\n"
        f"- Disabling: {state.mevo_disabling.value}\n"
        f"- Dependent: {state.mevo_dependent.value}\n"
        f"- Time: {_window(state.time)}\n"
        f"- Favorable Imaging: {state.mevo_salvageable.value.upper()}\n"
        f"\n"
        f"Details:\n"
        f"{result.details}"
    )


def build_emr_note(state: InputState, result: Optional[PathwayResult]) -> str:
    """Plain-text EMR note; empty string when there is no result yet."""
    if result is None:
        return ""
    if state.occlusion_type == OcclusionType.LVO:
        note = _lvo_note(state, result)
    else:
        note = _mevo_note(state, result)
    return note.strip()

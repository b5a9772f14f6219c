"""
EVT Pathway - Field Dependency Resolver

Given the field just answered, the active wizard section and the current
InputState, returns the next field to focus (or signals that the answered
field was the last one in the section).

The set of relevant fields is an explicit lookup: the branch key
(occlusion type, LVO location, time window) selects an ordered list per
section, and a few upstream answers (lvo, mRS, ASPECTS) extend it. The
same field can be present or absent depending on those answers; massEffect
only appears when ASPECTS is low enough for a mass-effect rule to apply.
"""

from enum import IntEnum
from typing import List, NamedTuple, Optional

from . import thresholds as th
from .models import (
    InputState,
    LvoLocation,
    MrsGroup,
    OcclusionType,
    TimeWindow,
    Tri,
)


class Section(IntEnum):
    TRIAGE = 1
    CLINICAL = 2
    IMAGING = 3
    DECISION = 4


class BranchKey(NamedTuple):
    occlusion_type: OcclusionType
    lvo_location: LvoLocation
    time: TimeWindow


class FieldFocus(NamedTuple):
    next_field: Optional[str]
    is_last: bool


def branch_key(state: InputState) -> BranchKey:
    return BranchKey(state.occlusion_type, state.lvo_location, state.time)


# ─── Base lists per branch ───

_TRIAGE_BASE = {
    OcclusionType.LVO: ["occlusionType", "lvoLocation"],
    OcclusionType.MEVO: ["occlusionType", "mevoLocation", "mevoDependent"],
}

_CLINICAL_TAIL = {
    OcclusionType.LVO: ["nihss"],
    OcclusionType.MEVO: ["nihssNumeric", "mevoDisabling"],
}

# mRS tiers that proceed to the age question (mRS 5 is a hard stop)
_MRS_ASKS_AGE = (MrsGroup.INDEPENDENT, MrsGroup.MRS_2, MrsGroup.MRS_3_4)


def _triage_fields(state: InputState) -> List[str]:
    ordered = list(_TRIAGE_BASE.get(state.occlusion_type, ["occlusionType"]))
    if state.occlusion_type != OcclusionType.LVO:
        return ordered

    if state.lvo_location != LvoLocation.UNKNOWN:
        ordered.append("lvo")
    if state.lvo == Tri.YES:
        ordered.append("mrs")
        if state.mrs in _MRS_ASKS_AGE:
            ordered.append("age")
    return ordered


def _clinical_fields(state: InputState) -> List[str]:
    return ["time"] + _CLINICAL_TAIL.get(state.occlusion_type, [])


def _imaging_fields(state: InputState) -> List[str]:
    key = branch_key(state)

    if key.occlusion_type == OcclusionType.MEVO:
        return ["mevoSalvageable", "mevoTechnical"]
    if key.occlusion_type != OcclusionType.LVO:
        return []

    if key.lvo_location == LvoLocation.BASILAR:
        return ["pcAspects"]

    aspects = th.parse_int_field(state.aspects)
    if key.time == TimeWindow.EARLY:
        # Very large core (ASPECTS 0-2) rule depends on mass effect
        ordered = ["aspects"]
        if th.below(aspects, th.ASPECTS_LARGE_CORE_MIN):
            ordered.append("massEffect")
        return ordered
    if key.time == TimeWindow.LATE:
        # Late ASPECTS 3-5 rule depends on mass effect
        ordered = ["aspects"]
        if th.below(aspects, th.ASPECTS_FAVORABLE):
            ordered.append("massEffect")
        return ordered + ["core", "mismatchVol", "mismatchRatio"]
    return []


_SECTION_FIELDS = {
    Section.TRIAGE: _triage_fields,
    Section.CLINICAL: _clinical_fields,
    Section.IMAGING: _imaging_fields,
}


def ordered_fields(section: int, state: InputState) -> List[str]:
    """Ordered field ids rendered in `section` for the current branch."""
    builder = _SECTION_FIELDS.get(section)
    if builder is None:
        return []
    return builder(state)


def get_next_field(answered_field: str, section: int, state: InputState) -> FieldFocus:
    """
    Successor of `answered_field` within the section's ordered list.

    Returns (None, True) when the field is last in the list and
    (None, False) when the field is not part of the active list.
    """
    ordered = ordered_fields(section, state)
    if answered_field not in ordered:
        return FieldFocus(None, False)
    idx = ordered.index(answered_field)
    if idx < len(ordered) - 1:
        return FieldFocus(ordered[idx + 1], False)
    return FieldFocus(None, True)

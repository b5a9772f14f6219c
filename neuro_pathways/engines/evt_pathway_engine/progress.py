"""
EVT Pathway - Section Progress

Per-section completeness, the collapsed-section headline text and
next/back navigation across the four wizard sections.
"""

from typing import Optional

from . import thresholds as th
from .field_resolver import Section
from .models import (
    AgeGroup,
    InputState,
    LvoLocation,
    MevoLocation,
    MrsGroup,
    NihssGroup,
    OcclusionType,
    PathwayResult,
    TimeWindow,
    Tri,
)


TIME_LABELS = {
    TimeWindow.EARLY: "0-6h",
    TimeWindow.LATE: "6-24h",
}


def time_label(time: TimeWindow) -> str:
    return TIME_LABELS.get(time, "")


def bucket_label(value: str) -> str:
    """EMR note form: '10_19' -> '10-19', '20_plus' -> '20-+', '80_plus' -> '80-+'

    Must stay byte-identical to the existing clipboard note text.
    """
    return value.replace("_", "-", 1).replace("plus", "+")


def headline_label(value: str) -> str:
    """Headline form: '10_19' -> '10-19', '20_plus' -> '20+'"""
    return value.replace("_plus", "+").replace("_", "-", 1)


def location_label(location: MevoLocation) -> str:
    return location.value.replace("_", " ", 1)


def _tri_label(value: Tri) -> str:
    return "?" if value == Tri.UNKNOWN else value.value.upper()


def late_aspects_resolves(state: InputState) -> bool:
    """ASPECTS alone settles the late-window imaging step (Rec #2 / Rec #3)."""
    aspects = th.parse_int_field(state.aspects)
    if th.at_least(aspects, th.ASPECTS_FAVORABLE):
        return True
    return (
        th.in_band(aspects, th.ASPECTS_LARGE_CORE_MIN, th.ASPECTS_FAVORABLE - 1)
        and state.mass_effect != Tri.UNKNOWN
    )


# ═══════════════════════════════════════════════════════════════════
# COMPLETENESS
# ═══════════════════════════════════════════════════════════════════

def _triage_complete(state: InputState) -> bool:
    if state.occlusion_type == OcclusionType.LVO:
        return (
            state.lvo_location != LvoLocation.UNKNOWN
            and state.lvo != Tri.UNKNOWN
            and (
                state.lvo == Tri.NO
                or (state.mrs != MrsGroup.UNKNOWN and state.age != AgeGroup.UNKNOWN)
            )
        )
    if state.occlusion_type == OcclusionType.MEVO:
        return (
            state.mevo_location != MevoLocation.UNKNOWN
            and state.mevo_dependent != Tri.UNKNOWN
        )
    return False


def _clinical_complete(state: InputState) -> bool:
    if state.time == TimeWindow.UNKNOWN:
        return False
    if state.occlusion_type == OcclusionType.LVO:
        return state.nihss != NihssGroup.UNKNOWN
    if state.occlusion_type == OcclusionType.MEVO:
        return state.nihss_numeric != "" and state.mevo_disabling != Tri.UNKNOWN
    return False


def _imaging_complete(state: InputState) -> bool:
    if state.occlusion_type == OcclusionType.MEVO:
        return (
            state.mevo_salvageable != Tri.UNKNOWN
            and state.mevo_technical != Tri.UNKNOWN
        )
    if state.occlusion_type != OcclusionType.LVO or state.time == TimeWindow.UNKNOWN:
        return False
    if state.lvo_location == LvoLocation.BASILAR:
        return state.pc_aspects != ""
    if state.time == TimeWindow.EARLY:
        return state.aspects != ""
    return state.core != "" or late_aspects_resolves(state)


def section_complete(section: int, state: InputState, result: Optional[PathwayResult]) -> bool:
    if section == Section.TRIAGE:
        return _triage_complete(state)
    if section == Section.CLINICAL:
        return _clinical_complete(state)
    if section == Section.IMAGING:
        return _imaging_complete(state)
    if section == Section.DECISION:
        return result is not None
    return False


def completed_count(state: InputState, result: Optional[PathwayResult]) -> int:
    return sum(1 for section in Section if section_complete(section, state, result))


# ═══════════════════════════════════════════════════════════════════
# COLLAPSED-SECTION HEADLINES
# ═══════════════════════════════════════════════════════════════════

def _triage_summary(state: InputState) -> Optional[str]:
    if state.occlusion_type == OcclusionType.LVO:
        loc = state.lvo_location
        return f"LVO • {'Location?' if loc == LvoLocation.UNKNOWN else loc.value}"
    if state.occlusion_type == OcclusionType.MEVO:
        loc = state.mevo_location
        return f"MeVO • {'Location?' if loc == MevoLocation.UNKNOWN else location_label(loc)}"
    return None


def _clinical_summary(state: InputState) -> Optional[str]:
    if state.time == TimeWindow.UNKNOWN:
        return None
    window = time_label(state.time)
    if state.occlusion_type == OcclusionType.LVO:
        nihss = "?" if state.nihss == NihssGroup.UNKNOWN else headline_label(state.nihss.value)
        return f"{window} • NIHSS {nihss}"
    return f"{window} • NIHSS {state.nihss_numeric or '?'}"


def _imaging_summary(state: InputState) -> Optional[str]:
    if state.occlusion_type == OcclusionType.MEVO:
        return f"Imaging {_tri_label(state.mevo_salvageable)} • Technical {_tri_label(state.mevo_technical)}"
    if state.occlusion_type != OcclusionType.LVO:
        return None

    if state.lvo_location == LvoLocation.BASILAR:
        return f"pc-ASPECTS {state.pc_aspects}" if state.pc_aspects else None
    if state.time == TimeWindow.EARLY:
        return f"ASPECTS {state.aspects}" if state.aspects else None
    if state.time == TimeWindow.LATE:
        if late_aspects_resolves(state):
            return f"ASPECTS {state.aspects}"
        return f"Core {state.core} mL" if state.core else None
    return None


def section_summary(section: int, state: InputState, result: Optional[PathwayResult]) -> Optional[str]:
    """Headline shown on a collapsed section; None when there is nothing to show."""
    if section == Section.TRIAGE:
        return _triage_summary(state)
    if section == Section.CLINICAL:
        return _clinical_summary(state)
    if section == Section.IMAGING:
        return _imaging_summary(state)
    if section == Section.DECISION and result is not None:
        return f"{result.status.value} • {result.reason}"
    return None


# ═══════════════════════════════════════════════════════════════════
# NAVIGATION
# ═══════════════════════════════════════════════════════════════════

def next_section(section: int) -> Section:
    return Section(min(Section.DECISION, max(Section.TRIAGE, section + 1)))


def previous_section(section: int) -> Section:
    return Section(max(Section.TRIAGE, min(Section.DECISION, section - 1)))


def clamp_section(section: int) -> Section:
    return Section(max(Section.TRIAGE, min(Section.DECISION, section)))

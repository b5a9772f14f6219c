"""
EVT Pathway - MeVO Rule Chain

Medium/distal vessel occlusions (M2, M3, ACA, PCA). Order:
hard stops -> imaging gate -> favorable dominant-M2 path ->
COR 3: No Benefit locations -> best medical therapy default.
"""

from . import guideline_text as text
from . import thresholds as th
from .models import (
    COR,
    InputState,
    MevoLocation,
    PathwayResult,
    Status,
    TimeWindow,
    Tri,
    Variant,
    class_label,
)


# AHA/ASA 2026 4.7.2 Rec #8: nondominant/codominant M2, distal MCA, ACA, PCA
NO_BENEFIT_LOCATIONS = frozenset({
    MevoLocation.NONDOMINANT_M2,
    MevoLocation.DISTAL,
    MevoLocation.ACA,
    MevoLocation.PCA,
})


class MevoRules:

    @staticmethod
    def evaluate(state: InputState) -> PathwayResult:
        score = th.parse_int_field(state.nihss_numeric)

        # ─── Hard stops ───
        if state.mevo_dependent == Tri.YES:
            return PathwayResult(
                status=Status.AVOID_EVT,
                reason="Baseline Dependency",
                details=text.MEVO_DEPENDENT,
                variant=Variant.DANGER,
            )
        if th.below(score, th.MEVO_DISABLING_NIHSS) and state.mevo_disabling == Tri.NO:
            return PathwayResult(
                status=Status.AVOID_EVT,
                reason="Non-disabling Deficit",
                details=text.MEVO_NON_DISABLING,
                variant=Variant.DANGER,
            )

        # ─── Imaging gate ───
        # 0-6h: favorable profile (small core, collaterals, or mismatch)
        # 6-24h: salvageable tissue (mismatch)
        if state.mevo_salvageable == Tri.NO:
            return PathwayResult(
                status=Status.AVOID_EVT,
                reason="Unfavorable Imaging",
                details=MevoRules.unfavorable_imaging_text(state.time),
                variant=Variant.DANGER,
            )

        # ─── Favorable: dominant M2 ───
        has_deficit = th.at_least(score, th.MEVO_DISABLING_NIHSS) or state.mevo_disabling == Tri.YES
        if (
            state.mevo_location == MevoLocation.DOMINANT_M2
            and has_deficit
            and state.mevo_technical == Tri.YES
        ):
            return PathwayResult(
                status=Status.EVT_REASONABLE,
                eligible=True,
                criteria_name="Selected MeVO",
                reason="Dominant M2 + Disabling",
                details=text.MEVO_SELECTED,
                variant=Variant.SUCCESS,
            )

        # ─── COR 3: No Benefit ───
        if state.mevo_location in NO_BENEFIT_LOCATIONS:
            return PathwayResult(
                status=Status.AVOID_EVT,
                criteria_name=class_label(COR.COR_3_NO_BENEFIT),
                reason="Nondominant / Distal Vessel — Not Recommended",
                details=text.MEVO_NO_BENEFIT,
                exclusion_reason="COR 3: No Benefit — nondominant/distal vessel location.",
                variant=Variant.DANGER,
                relevant_trials=("ESCAPE-MeVO", "DISTAL"),
            )

        # ─── Default: best medical therapy ───
        if state.mevo_technical == Tri.NO:
            return PathwayResult(
                status=Status.BMT_PREFERRED,
                reason="High Technical Risk",
                details=text.MEVO_HIGH_TECHNICAL_RISK,
                variant=Variant.NEUTRAL,
            )

        return PathwayResult(
            status=Status.BMT_PREFERRED,
            reason="Standard MeVO Criteria",
            details=text.MEVO_DEFAULT,
            variant=Variant.NEUTRAL,
        )

    @staticmethod
    def unfavorable_imaging_text(time: TimeWindow) -> str:
        if time == TimeWindow.EARLY:
            return text.MEVO_UNFAVORABLE_EARLY
        if time == TimeWindow.LATE:
            return text.MEVO_UNFAVORABLE_LATE
        return text.MEVO_UNFAVORABLE_ANY

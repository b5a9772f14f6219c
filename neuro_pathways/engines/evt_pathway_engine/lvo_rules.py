"""
EVT Pathway - LVO Rule Chain

Deterministic classifier for large-vessel occlusions (ICA / M1 / basilar)
based on the 2026 AHA/ASA AIS guideline, Section 4.7.2.

Guards are evaluated top to bottom and the first match returns. Hard
exclusions are checked before the completeness guard, and the completeness
guard before any guideline-class scoring. Every reachable InputState maps to
exactly one PathwayResult; nothing here raises.
"""

from . import guideline_text as text
from . import thresholds as th
from .models import (
    COR,
    AgeGroup,
    InputState,
    LvoLocation,
    MrsGroup,
    NihssGroup,
    PathwayResult,
    Status,
    TimeWindow,
    Tri,
    Variant,
    class_label,
    incomplete,
)


PENDING_IMAGING = "Pending Imaging"


class LvoRules:
    """
    Rule chain for LVO thrombectomy eligibility.

    evaluate() is the entry point; basilar(), early_window() and
    late_window() assume the hard exclusions and completeness guard
    have already passed.
    """

    @staticmethod
    def evaluate(state: InputState) -> PathwayResult:
        # ─── 1. Hard exclusions ───
        if state.lvo == Tri.NO:
            return PathwayResult(
                status=Status.NOT_ELIGIBLE,
                reason="No Large Vessel Occlusion (LVO)",
                details=text.NO_LVO,
                exclusion_reason="Absence of LVO target.",
                variant=Variant.DANGER,
            )
        if state.mrs == MrsGroup.ABOVE_4:
            return PathwayResult(
                status=Status.NOT_ELIGIBLE,
                reason="Pre-stroke Disability (mRS > 4)",
                details=text.MRS_ABOVE_4,
                exclusion_reason="Poor baseline functional status.",
                variant=Variant.DANGER,
            )
        if state.age == AgeGroup.UNDER_18:
            return PathwayResult(
                status=Status.CONSULT,
                reason="Pediatric Patient",
                details=text.PEDIATRIC,
                exclusion_reason="Age < 18.",
                variant=Variant.WARNING,
            )

        # ─── 2. Completeness guard ───
        if (
            state.lvo == Tri.UNKNOWN
            or state.mrs == MrsGroup.UNKNOWN
            or state.nihss == NihssGroup.UNKNOWN
            or state.time == TimeWindow.UNKNOWN
        ):
            return incomplete("Incomplete Data")

        # ─── 3. Vessel location ───
        if state.lvo_location == LvoLocation.BASILAR:
            return LvoRules.basilar(state)
        if state.lvo_location == LvoLocation.UNKNOWN:
            return incomplete("Vessel Location Pending")

        if state.time == TimeWindow.EARLY:
            return LvoRules.early_window(state)
        return LvoRules.late_window(state)

    # ─── Basilar artery (pc-ASPECTS) ───

    @staticmethod
    def basilar(state: InputState) -> PathwayResult:
        pc_score = th.parse_int_field(state.pc_aspects)
        nihss = th.nihss_representative(state.nihss)

        if pc_score is None or nihss is None:
            return incomplete(PENDING_IMAGING)
        if not th.in_band(pc_score, 0, th.ASPECTS_MAX):
            return incomplete("Incomplete Imaging")

        trials = ("ATTENTION", "BAOCHE")

        if pc_score < th.ASPECTS_FAVORABLE:
            return PathwayResult(
                status=Status.AVOID_EVT,
                reason=f"Extensive Infarct (pc-ASPECTS {pc_score})",
                details=text.BASILAR_AVOID,
                exclusion_reason="pc-ASPECTS < 6",
                variant=Variant.DANGER,
            )

        if nihss >= th.NIHSS_BASILAR_CLASS_I:
            return PathwayResult(
                status=Status.ELIGIBLE,
                eligible=True,
                criteria_name=f"Basilar EVT - {class_label(COR.COR_1)}",
                reason=f"Favorable Imaging (pc-ASPECTS {pc_score}, NIHSS ≥10)",
                details=text.BASILAR_CLASS_I,
                variant=Variant.SUCCESS,
                relevant_trials=trials,
            )

        if nihss >= th.NIHSS_EVT_MIN:
            return PathwayResult(
                status=Status.CLINICAL_JUDGMENT,
                eligible=True,
                criteria_name=f"Basilar EVT - {class_label(COR.COR_2B)}",
                reason=f"Moderate Severity (pc-ASPECTS {pc_score}, NIHSS 6–9)",
                details=text.BASILAR_CLASS_IIB,
                variant=Variant.WARNING,
                relevant_trials=trials,
            )

        return PathwayResult(
            status=Status.CONSULT,
            reason=f"Low NIHSS (< 6) with pc-ASPECTS {pc_score}",
            details=text.BASILAR_LOW_NIHSS,
            exclusion_reason="NIHSS < 6",
            variant=Variant.WARNING,
        )

    # ─── Anterior circulation: 0-6h ───

    @staticmethod
    def early_window(state: InputState) -> PathwayResult:
        aspects = th.parse_int_field(state.aspects)
        if aspects is None:
            return incomplete(PENDING_IMAGING)

        if state.nihss == NihssGroup.NIHSS_0_5:
            return PathwayResult(
                status=Status.CLINICAL_JUDGMENT,
                eligible=True,
                criteria_name="Early Window (Low NIHSS)",
                reason="Low NIHSS (< 6)",
                details=text.EARLY_LOW_NIHSS,
                variant=Variant.WARNING,
            )

        # COR 2a: prestroke mRS 2 + ASPECTS >= 6
        if state.mrs == MrsGroup.MRS_2:
            if aspects >= th.ASPECTS_FAVORABLE:
                return PathwayResult(
                    status=Status.EVT_REASONABLE,
                    eligible=True,
                    criteria_name=f"Early Window mRS 2 - {class_label(COR.COR_2A)}",
                    reason="Prestroke mRS 2, ASPECTS ≥ 6",
                    details=text.EARLY_MRS2_CLASS_IIA,
                    variant=Variant.WARNING,
                )
            return PathwayResult(
                status=Status.CONSULT,
                reason="Prestroke mRS 2, ASPECTS < 6",
                details=text.EARLY_MRS2_CONSULT,
                exclusion_reason="mRS 2 with large core",
                variant=Variant.DANGER,
            )

        # COR 2b: prestroke mRS 3-4 + ASPECTS >= 6
        if state.mrs == MrsGroup.MRS_3_4:
            if aspects >= th.ASPECTS_FAVORABLE:
                return PathwayResult(
                    status=Status.CLINICAL_JUDGMENT,
                    eligible=True,
                    criteria_name=f"Early Window mRS 3-4 - {class_label(COR.COR_2B)}",
                    reason="Prestroke mRS 3–4, ASPECTS ≥ 6",
                    details=text.EARLY_MRS34_CLASS_IIB,
                    variant=Variant.WARNING,
                )
            return PathwayResult(
                status=Status.CONSULT,
                reason="Prestroke mRS 3–4",
                details=text.EARLY_MRS34_CONSULT,
                exclusion_reason="mRS 3–4 criteria not met",
                variant=Variant.DANGER,
            )

        # COR 1: mRS 0-1, NIHSS >= 6, ASPECTS 3-10
        if th.in_band(aspects, th.ASPECTS_LARGE_CORE_MIN, th.ASPECTS_MAX):
            return PathwayResult(
                status=Status.ELIGIBLE,
                eligible=True,
                criteria_name=f"Standard Early Window - {class_label(COR.COR_1)}",
                reason="ASPECTS 3–10",
                details=text.EARLY_CLASS_I,
                variant=Variant.SUCCESS,
                relevant_trials=("MR CLEAN", "ESCAPE", "REVASCAT", "SWIFT PRIME",
                                 "EXTEND-IA", "HERMES", "SELECT2", "ANGEL ASPECT"),
            )

        if th.in_band(aspects, 0, th.ASPECTS_LARGE_CORE_MIN - 1):
            # COR 2a: ASPECTS 0-2, age < 80, no significant mass effect
            if state.age == AgeGroup.AGE_18_79 and state.mass_effect == Tri.NO:
                return PathwayResult(
                    status=Status.EVT_REASONABLE,
                    eligible=True,
                    criteria_name=f"Very Large Core (ASPECTS 0–2) - {class_label(COR.COR_2A)}",
                    reason="ASPECTS 0–2, age <80, no significant mass effect",
                    details=text.EARLY_VERY_LARGE_CORE_CLASS_IIA,
                    variant=Variant.WARNING,
                    relevant_trials=("TENSION",),
                )
            # Age >= 80, unknown age, or mass effect present/unknown
            return PathwayResult(
                status=Status.CONSULT,
                reason="Very Large Core (ASPECTS 0–2)",
                details=text.EARLY_VERY_LARGE_CORE_CONSULT,
                exclusion_reason="ASPECTS 0–2",
                variant=Variant.DANGER,
            )

        # ASPECTS outside 0-10
        return incomplete("Incomplete Imaging")

    # ─── Anterior circulation: 6-24h ───

    @staticmethod
    def late_window(state: InputState) -> PathwayResult:
        if state.mrs in (MrsGroup.MRS_2, MrsGroup.MRS_3_4):
            return PathwayResult(
                status=Status.CONSULT,
                reason="Prestroke mRS ≥ 2 in Late Window",
                details=text.LATE_DEPENDENT_CONSULT,
                exclusion_reason="No late-window recommendation for prestroke mRS ≥ 2",
                variant=Variant.DANGER,
            )

        aspects = th.parse_int_field(state.aspects)
        nihss = th.nihss_representative(state.nihss)
        meets_nihss = th.at_least(nihss, th.NIHSS_EVT_MIN)

        if aspects is not None and not th.in_band(aspects, 0, th.ASPECTS_MAX):
            return incomplete("Incomplete Imaging")

        # COR 1 (Rec #2, LOE A): mRS 0-1, NIHSS >= 6, ASPECTS >= 6
        if meets_nihss and th.at_least(aspects, th.ASPECTS_FAVORABLE):
            return PathwayResult(
                status=Status.ELIGIBLE,
                eligible=True,
                criteria_name=f"Late Window ASPECTS ≥ 6 - {class_label(COR.COR_1)}",
                reason=f"ASPECTS {aspects}, NIHSS ≥6, mRS 0–1",
                details=text.LATE_ASPECTS_6_CLASS_I,
                variant=Variant.SUCCESS,
                relevant_trials=("DAWN", "DEFUSE-3"),
            )

        # COR 1 (Rec #3, LOE A): age < 80, NIHSS >= 6, ASPECTS 3-5, no mass effect
        if (
            meets_nihss
            and state.age == AgeGroup.AGE_18_79
            and th.in_band(aspects, th.ASPECTS_LARGE_CORE_MIN, th.ASPECTS_FAVORABLE - 1)
            and state.mass_effect == Tri.NO
        ):
            return PathwayResult(
                status=Status.ELIGIBLE,
                eligible=True,
                criteria_name=f"Late Window ASPECTS 3–5 - {class_label(COR.COR_1)}",
                reason="ASPECTS 3–5, age <80, NIHSS ≥6, no significant mass effect",
                details=text.LATE_ASPECTS_3_5_CLASS_I,
                variant=Variant.SUCCESS,
                relevant_trials=("SELECT2", "ANGEL ASPECT"),
            )

        core = th.parse_int_field(state.core)
        if core is None:
            return incomplete(PENDING_IMAGING)

        if th.meets_dawn(state.age, nihss, core):
            return PathwayResult(
                status=Status.ELIGIBLE,
                eligible=True,
                criteria_name="DAWN Criteria",
                reason="Clinical-Core Mismatch",
                details=text.DAWN_ELIGIBLE,
                variant=Variant.SUCCESS,
                relevant_trials=("DAWN",),
            )

        mismatch_vol = th.parse_int_field(state.mismatch_vol)
        ratio = th.parse_float_field(state.mismatch_ratio)
        if th.meets_defuse3(core, mismatch_vol, ratio):
            return PathwayResult(
                status=Status.ELIGIBLE,
                eligible=True,
                criteria_name="DEFUSE-3 Criteria",
                reason="Perfusion Mismatch",
                details=text.DEFUSE3_ELIGIBLE,
                variant=Variant.SUCCESS,
                relevant_trials=("DEFUSE-3",),
            )

        # COR 2b: large core 50-100 mL
        if th.in_band(core, th.LARGE_CORE_MIN, th.LARGE_CORE_MAX):
            return PathwayResult(
                status=Status.CLINICAL_JUDGMENT,
                eligible=True,
                criteria_name=f"Large Core (50-100 mL) - {class_label(COR.COR_2B)}",
                reason=f"Large Core Volume ({core} mL)",
                details=text.LARGE_CORE_CLASS_IIB,
                variant=Variant.WARNING,
                relevant_trials=("SELECT2", "ANGEL ASPECT"),
            )

        if core > th.LARGE_CORE_MAX:
            return PathwayResult(
                status=Status.AVOID_EVT,
                reason=f"Very Large Core ({core} mL)",
                details=text.VERY_LARGE_CORE_AVOID,
                exclusion_reason="Core volume >100 mL",
                variant=Variant.DANGER,
            )

        return PathwayResult(
            status=Status.NOT_ELIGIBLE,
            reason="No Target Profile",
            details=text.NOT_ELIGIBLE_LATE,
            exclusion_reason="Imaging criteria not met.",
            variant=Variant.DANGER,
        )

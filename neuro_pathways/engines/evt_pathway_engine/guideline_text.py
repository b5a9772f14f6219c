"""
EVT Pathway - Guideline Citation Text

Verbatim recommendation text shown in PathwayResult.details. Wording is
reproduced in the EMR note, so edits here change the audit trail.
"""

# ─── LVO: hard exclusions ───

NO_LVO = "Thrombectomy is indicated for occlusions of the ICA, MCA (M1), or Basilar Artery."
MRS_ABOVE_4 = (
    "EVT is not recommended for prestroke mRS > 4. Standard criteria require mRS 0–1, "
    "selected mRS 2, or mRS 3–4 (Class IIb in 0–6h with ASPECTS ≥6)."
)
PEDIATRIC = (
    "Standard guidelines apply to age ≥ 18. Pediatric thrombectomy requires "
    "specialized consultation."
)

# ─── LVO: basilar ───

BASILAR_CLASS_I = (
    "Class I recommendation: EVT strongly recommended for Basilar Artery Occlusion within 24h "
    "with pc-ASPECTS ≥6 and NIHSS ≥10. Strong evidence from ATTENTION and BAOCHE trials. "
    "(2026 AHA/ASA Guidelines)"
)
BASILAR_CLASS_IIB = (
    "Class IIb recommendation: EVT may be considered for Basilar occlusion with pc-ASPECTS ≥6 "
    "and NIHSS 6–9. Individualized decision based on clinical context. (2026 AHA/ASA Guidelines)"
)
BASILAR_LOW_NIHSS = (
    "pc-ASPECTS ≥6 but NIHSS < 6: basilar EVT recommendations (Class I / IIb) require NIHSS ≥6. "
    "Mild presentations of basilar occlusion may deteriorate; individualized decision with "
    "Vascular Neurology/Neurointerventional."
)
BASILAR_AVOID = (
    "pc-ASPECTS < 6 indicates large established brainstem/cerebellar infarction. EVT is "
    "associated with high rates of futile reperfusion and mortality. (2026 Guidelines)"
)

# ─── LVO: anterior 0-6h ───

EARLY_LOW_NIHSS = (
    "Guidelines recommend EVT if deficit is disabling despite low score "
    "(e.g., aphasia, hemianopsia)."
)
EARLY_MRS2_CLASS_IIA = (
    "Class IIa: In patients with NIHSS ≥6 and ASPECTS ≥6 who have prestroke mRS 2, EVT is "
    "reasonable to improve functional outcomes and reduce accumulated disability. "
    "(AHA/ASA 2026, Section 4.7.2)"
)
EARLY_MRS2_CONSULT = (
    "Evidence for EVT in mRS 2 is limited to ASPECTS ≥6. Individualized decision with "
    "Vascular Neurology/Neurointerventional."
)
EARLY_MRS34_CLASS_IIB = (
    "Class IIb: In patients with anterior LVO within 6h, NIHSS ≥6, and ASPECTS ≥6 who have "
    "prestroke mRS 3–4, EVT may be considered. Benefits may outweigh risks in selected "
    "patients; individualized decision with Vascular Neurology/Neurointerventional. "
    "(AHA/ASA 2026 infographic)"
)
EARLY_MRS34_CONSULT = (
    "Evidence for EVT in mRS 3–4 is limited to 0–6h with ASPECTS ≥6 and NIHSS ≥6. "
    "Individualized decision with Vascular Neurology/Neurointerventional."
)
EARLY_CLASS_I = (
    "Class I: EVT is recommended for anterior circulation LVO (ICA/M1) within 6h with NIHSS ≥6, "
    "prestroke mRS 0–1, and ASPECTS 3–10 to improve functional outcomes and reduce mortality. "
    "(AHA/ASA 2026, Section 4.7.2)"
)
EARLY_VERY_LARGE_CORE_CLASS_IIA = (
    "Class IIa: In selected patients with anterior LVO within 6h, age <80 years, NIHSS ≥6, "
    "mRS 0–1, ASPECTS 0–2, and without significant mass effect, EVT is reasonable. "
    "(AHA/ASA 2026, Section 4.7.2)"
)
EARLY_VERY_LARGE_CORE_CONSULT = (
    "High risk of futile reperfusion. Class IIa applies only to selected patients age <80 "
    "without significant mass effect. Individualized decision."
)

# ─── LVO: anterior 6-24h ───

LATE_DEPENDENT_CONSULT = (
    "Late-window (6–24h) EVT recommendations are based on trial populations with prestroke "
    "mRS 0–1. The Class IIa (mRS 2) and Class IIb (mRS 3–4) recommendations apply to the "
    "0–6h window only. Individualized decision with Vascular Neurology/Neurointerventional."
)
LATE_ASPECTS_6_CLASS_I = (
    "Class I (LOE A): In patients with anterior circulation LVO presenting 6–24h from onset "
    "with NIHSS ≥6, prestroke mRS 0–1, and ASPECTS ≥6, EVT is recommended to improve "
    "functional outcomes and reduce mortality. (AHA/ASA 2026, Section 4.7.2, Rec #2)"
)
LATE_ASPECTS_3_5_CLASS_I = (
    "Class I (LOE A): In selected patients with anterior LVO 6–24h from onset, age <80 years, "
    "NIHSS ≥6, mRS 0–1, ASPECTS 3–5, and without significant mass effect, EVT is recommended. "
    "(AHA/ASA 2026, Section 4.7.2, Rec #3)"
)
DAWN_ELIGIBLE = (
    "Class I recommendation: EVT based on DAWN criteria (clinical-core mismatch). Age, NIHSS, "
    "and core volume meet favorable profile for late-window (6-24h) intervention. Strong "
    "evidence of benefit. (2026 AHA/ASA Guidelines, reaffirmed from DAWN trial)"
)
DEFUSE3_ELIGIBLE = (
    "Class I recommendation: EVT based on DEFUSE-3 criteria (perfusion mismatch). Core <70 mL, "
    "mismatch volume ≥15 mL, and mismatch ratio ≥1.8 indicate substantial salvageable tissue. "
    "Strong evidence for benefit in 6-16h window. (2026 AHA/ASA Guidelines, reaffirmed from "
    "DEFUSE-3 trial)"
)
LARGE_CORE_CLASS_IIB = (
    "Class IIb: EVT MAY be considered for large cores (50-100 mL) in 6-24h window based on "
    "SELECT2/ANGEL-ASPECT trials. Higher risk of symptomatic ICH (15-20%) and uncertain "
    "functional benefit. Requires individualized assessment and informed consent. "
    "(2026 AHA/ASA Guidelines)"
)
VERY_LARGE_CORE_AVOID = (
    "Core >100 mL: EVT is NOT recommended due to very high rates of futile reperfusion (>80%), "
    "hemorrhagic transformation (>20%), and mortality. Best medical therapy preferred. "
    "(2026 AHA/ASA Guidelines)"
)
NOT_ELIGIBLE_LATE = (
    "No target profile met for late-window EVT. Patient does not meet DAWN criteria "
    "(clinical-core mismatch) or DEFUSE-3 criteria (perfusion mismatch). Consider best "
    "medical therapy. (2026 AHA/ASA Guidelines)"
)

# ─── MeVO ───

MEVO_DEPENDENT = "Avoid EVT based on baseline dependency (requires daily nursing care)."
MEVO_NON_DISABLING = "Avoid EVT for low NIHSS (<5) without disabling features."
MEVO_UNFAVORABLE_EARLY = "Avoid EVT. Imaging suggests large established infarct or poor collaterals."
MEVO_UNFAVORABLE_LATE = "Avoid EVT. No evidence of salvageable tissue (penumbra) in late window."
MEVO_UNFAVORABLE_ANY = "Avoid EVT. Imaging does not show a favorable or salvageable tissue profile."
MEVO_SELECTED = (
    "EVT reasonable for selected MeVO (disabling deficit + favorable imaging + feasible "
    "anatomy). Discuss urgently with neurointerventional."
)
MEVO_NO_BENEFIT = (
    "COR 3: No Benefit (LOE A) — The 2026 AHA/ASA Guidelines do not recommend EVT for "
    "nondominant or codominant proximal M2, distal MCA, ACA, or PCA occlusions. Based on "
    "ESCAPE-MeVO (2025) and DISTAL (2025), which showed no functional benefit and higher sICH "
    "rates. Specialist consultation required for exceptional cases. "
    "(AHA/ASA 2026, Section 4.7.2, Rec #8)"
)
MEVO_HIGH_TECHNICAL_RISK = "Procedural risks (access, tortuosity, distal location) likely outweigh benefits."
MEVO_DEFAULT = (
    "Best medical therapy preferred for this MeVO pattern; evidence for routine EVT is "
    "not established."
)

"""
EVT Pathway - Data Models

Closed tag enums for every wizard question, the InputState that carries the
answers, and the PathwayResult returned by the classifiers.

Every tagged field has an explicit UNKNOWN member. Free-text numeric fields
(ASPECTS, pc-ASPECTS, core, mismatch, numeric NIHSS) stay as strings and are
parsed on demand by thresholds.py.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Optional


# ═══════════════════════════════════════════════════════════════════
# 1. ERRORS (InputState construction boundary)
# ═══════════════════════════════════════════════════════════════════

class PathwayInputError(ValueError):
    """Raised when caller-supplied input cannot become an InputState."""


class UnknownField(PathwayInputError):
    def __init__(self, field_id: str):
        super().__init__(f"Unknown field: {field_id!r}")
        self.field_id = field_id


class InvalidFieldValue(PathwayInputError):
    def __init__(self, field_id: str, value, allowed: list):
        super().__init__(
            f"Invalid value {value!r} for {field_id!r} (allowed: {', '.join(allowed)})"
        )
        self.field_id = field_id
        self.value = value
        self.allowed = allowed


# ═══════════════════════════════════════════════════════════════════
# 2. TAG ENUMS
# ═══════════════════════════════════════════════════════════════════

class Tri(str, Enum):
    YES = "yes"
    NO = "no"
    UNKNOWN = "unknown"


class MrsGroup(str, Enum):
    """Prestroke mRS tier."""
    INDEPENDENT = "yes"      # mRS 0-1
    MRS_2 = "mrs2"
    MRS_3_4 = "mrs34"
    ABOVE_4 = "no"           # mRS 5
    UNKNOWN = "unknown"


class AgeGroup(str, Enum):
    UNDER_18 = "under_18"
    AGE_18_79 = "18_79"
    AGE_80_PLUS = "80_plus"
    UNKNOWN = "unknown"


class TimeWindow(str, Enum):
    EARLY = "0_6"
    LATE = "6_24"
    UNKNOWN = "unknown"


class NihssGroup(str, Enum):
    NIHSS_0_5 = "0_5"
    NIHSS_6_9 = "6_9"
    NIHSS_10_19 = "10_19"
    NIHSS_20_PLUS = "20_plus"
    UNKNOWN = "unknown"


class OcclusionType(str, Enum):
    LVO = "lvo"
    MEVO = "mevo"
    UNKNOWN = "unknown"


class LvoLocation(str, Enum):
    ANTERIOR = "anterior"
    BASILAR = "basilar"
    UNKNOWN = "unknown"


class MevoLocation(str, Enum):
    DOMINANT_M2 = "dominant_m2"
    NONDOMINANT_M2 = "nondominant_m2"
    DISTAL = "distal"
    ACA = "aca"
    PCA = "pca"
    UNKNOWN = "unknown"


class Status(str, Enum):
    ELIGIBLE = "Eligible"
    EVT_REASONABLE = "EVT Reasonable"
    CLINICAL_JUDGMENT = "Clinical Judgment"
    CONSULT = "Consult"
    HIGH_UNCERTAINTY = "High Uncertainty"
    BMT_PREFERRED = "BMT Preferred"
    AVOID_EVT = "Avoid EVT"
    NOT_ELIGIBLE = "Not Eligible"
    INCOMPLETE = "Incomplete"

    @property
    def strength(self) -> int:
        """Ordinal recommendation strength, higher = stronger support for EVT."""
        return _STATUS_STRENGTH[self]


_STATUS_STRENGTH = {
    Status.ELIGIBLE: 5,
    Status.EVT_REASONABLE: 4,
    Status.CLINICAL_JUDGMENT: 3,
    Status.CONSULT: 2,
    Status.HIGH_UNCERTAINTY: 2,
    Status.BMT_PREFERRED: 1,
    Status.AVOID_EVT: 0,
    Status.NOT_ELIGIBLE: 0,
    Status.INCOMPLETE: 0,
}


class Variant(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"
    NEUTRAL = "neutral"


class COR(str, Enum):
    """AHA Class of Recommendation"""
    COR_1 = "I"
    COR_2A = "IIa"
    COR_2B = "IIb"
    COR_3_NO_BENEFIT = "III: No Benefit"


# ═══════════════════════════════════════════════════════════════════
# 3. INPUT STATE
# ═══════════════════════════════════════════════════════════════════

# field id (wire / UI name) -> InputState attribute
FIELD_IDS = {
    "occlusionType": "occlusion_type",
    "lvoLocation": "lvo_location",
    "lvo": "lvo",
    "mrs": "mrs",
    "age": "age",
    "time": "time",
    "nihss": "nihss",
    "aspects": "aspects",
    "pcAspects": "pc_aspects",
    "massEffect": "mass_effect",
    "core": "core",
    "mismatchVol": "mismatch_vol",
    "mismatchRatio": "mismatch_ratio",
    "mevoLocation": "mevo_location",
    "mevoDependent": "mevo_dependent",
    "nihssNumeric": "nihss_numeric",
    "mevoDisabling": "mevo_disabling",
    "mevoSalvageable": "mevo_salvageable",
    "mevoTechnical": "mevo_technical",
}

ATTRIBUTE_TO_FIELD_ID = {attr: fid for fid, attr in FIELD_IDS.items()}


@dataclass(frozen=True)
class InputState:
    """Every answered/unanswered wizard question for one session."""

    # Path selector
    occlusion_type: OcclusionType = OcclusionType.UNKNOWN

    # LVO
    lvo_location: LvoLocation = LvoLocation.UNKNOWN
    lvo: Tri = Tri.UNKNOWN
    mrs: MrsGroup = MrsGroup.UNKNOWN
    age: AgeGroup = AgeGroup.UNKNOWN
    time: TimeWindow = TimeWindow.UNKNOWN
    nihss: NihssGroup = NihssGroup.UNKNOWN
    aspects: str = ""
    pc_aspects: str = ""
    mass_effect: Tri = Tri.UNKNOWN
    core: str = ""
    mismatch_vol: str = ""
    mismatch_ratio: str = ""

    # MeVO
    mevo_location: MevoLocation = MevoLocation.UNKNOWN
    mevo_dependent: Tri = Tri.UNKNOWN     # requires daily nursing care
    nihss_numeric: str = ""
    mevo_disabling: Tri = Tri.UNKNOWN
    mevo_salvageable: Tri = Tri.UNKNOWN   # favorable imaging (0-6h) / salvageable tissue (6-24h)
    mevo_technical: Tri = Tri.UNKNOWN     # low procedural risk

    @classmethod
    def from_dict(cls, data: dict) -> "InputState":
        """Build a state from a dict keyed by field ids. Missing keys keep defaults."""
        if data is not None and not isinstance(data, dict):
            raise PathwayInputError(f"Inputs must be an object, got {type(data).__name__}")
        values = {}
        for field_id, raw in (data or {}).items():
            attr = attribute_for(field_id)
            values[attr] = coerce_value(field_id, raw)
        return cls(**values)

    def to_dict(self) -> dict:
        out = {}
        for f in fields(self):
            value = getattr(self, f.name)
            out[ATTRIBUTE_TO_FIELD_ID[f.name]] = value.value if isinstance(value, Enum) else value
        return out

    def get(self, field_id: str):
        return getattr(self, attribute_for(field_id))


def attribute_for(field_id: str) -> str:
    if not isinstance(field_id, str):
        raise UnknownField(field_id)
    try:
        return FIELD_IDS[field_id]
    except KeyError:
        raise UnknownField(field_id) from None


def field_type(field_id: str):
    attr = attribute_for(field_id)
    return InputState.__dataclass_fields__[attr].type


def coerce_value(field_id: str, raw):
    """Coerce a raw wire value into the declared type of `field_id`."""
    expected = field_type(field_id)

    if isinstance(expected, type) and issubclass(expected, Enum):
        if isinstance(raw, expected):
            return raw
        try:
            return expected(raw)
        except ValueError:
            raise InvalidFieldValue(field_id, raw, [m.value for m in expected]) from None

    # Free-text numeric field
    if raw is None:
        return ""
    if isinstance(raw, bool):
        raise InvalidFieldValue(field_id, raw, ["text"])
    if isinstance(raw, (int, float)):
        return str(raw)
    if isinstance(raw, str):
        return raw
    raise InvalidFieldValue(field_id, raw, ["text"])


# ═══════════════════════════════════════════════════════════════════
# 4. RESULT
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class PathwayResult:
    """Classifier output consumed by the renderer, note generator and analytics."""
    status: Status
    reason: str
    details: str = ""
    variant: Variant = Variant.NEUTRAL
    eligible: bool = False
    criteria_name: Optional[str] = None
    exclusion_reason: Optional[str] = None
    relevant_trials: tuple = ()

    def to_dict(self) -> dict:
        out = {
            "eligible": self.eligible,
            "status": self.status.value,
            "reason": self.reason,
            "details": self.details,
            "variant": self.variant.value,
        }
        if self.criteria_name is not None:
            out["criteriaName"] = self.criteria_name
        if self.exclusion_reason is not None:
            out["exclusionReason"] = self.exclusion_reason
        if self.relevant_trials:
            out["relevantTrials"] = list(self.relevant_trials)
        return out


def incomplete(reason: str) -> PathwayResult:
    """Neutral placeholder shown while data entry is still in progress."""
    return PathwayResult(status=Status.INCOMPLETE, reason=reason, variant=Variant.NEUTRAL)


def class_label(cor: COR) -> str:
    return f"Class {cor.value}"

"""
EVT Pathway - Threshold Helpers

Free-text score parsing and the fixed numeric cut-offs used by the
classifiers. A parse failure returns None ("not-a-number"); callers must
check for None before any comparison so that an unanswered score is never
read as zero.
"""

import re
from typing import Optional

from .models import AgeGroup, NihssGroup


_INT_PREFIX = re.compile(r'^\s*([+-]?\d+)')
_FLOAT_PREFIX = re.compile(r'^\s*([+-]?(?:\d+\.?\d*|\.\d+))')


def parse_int_field(text: str) -> Optional[int]:
    """Leading-integer parse of a free-text score ("7", " 7 ", "7.5" -> 7)."""
    if not text:
        return None
    m = _INT_PREFIX.match(text)
    return int(m.group(1)) if m else None


def parse_float_field(text: str) -> Optional[float]:
    if not text:
        return None
    m = _FLOAT_PREFIX.match(text)
    return float(m.group(1)) if m else None


# NIHSS bucket -> representative value. Comparison only, never displayed.
NIHSS_REPRESENTATIVE = {
    NihssGroup.NIHSS_0_5: 2,
    NihssGroup.NIHSS_6_9: 8,
    NihssGroup.NIHSS_10_19: 15,
    NihssGroup.NIHSS_20_PLUS: 25,
}


def nihss_representative(group: NihssGroup) -> Optional[int]:
    return NIHSS_REPRESENTATIVE.get(group)


def at_least(value, threshold) -> bool:
    """`value >= threshold`, False when value is not a number."""
    return value is not None and value >= threshold


def below(value, threshold) -> bool:
    """`value < threshold`, False when value is not a number."""
    return value is not None and value < threshold


def in_band(value, low, high) -> bool:
    """Inclusive band check, False when value is not a number."""
    return value is not None and low <= value <= high


# ─── Anterior / posterior imaging cut-offs ───

ASPECTS_FAVORABLE = 6          # ASPECTS / pc-ASPECTS >= 6
ASPECTS_LARGE_CORE_MIN = 3     # ASPECTS 3-5 band floor
ASPECTS_MAX = 10

NIHSS_EVT_MIN = 6
NIHSS_BASILAR_CLASS_I = 10
MEVO_DISABLING_NIHSS = 5

# ─── DAWN clinical-core mismatch ───

DAWN_NIHSS_MIN = 10
DAWN_NIHSS_HIGH = 20
DAWN_CORE_AGE_80_PLUS = 21     # core < 21 mL when age >= 80
DAWN_CORE_UNDER_80 = 31        # core < 31 mL when age < 80
DAWN_CORE_UNDER_80_HIGH = 51   # core < 51 mL when age < 80 and NIHSS >= 20

# ─── DEFUSE-3 perfusion mismatch ───

DEFUSE3_CORE_MAX = 70          # core < 70 mL
DEFUSE3_MISMATCH_MIN = 15      # mismatch volume >= 15 mL
DEFUSE3_RATIO_MIN = 1.8

# ─── Large core (6-24h) ───

LARGE_CORE_MIN = 50
LARGE_CORE_MAX = 100


def meets_dawn(age: AgeGroup, nihss_rep: Optional[int], core: Optional[int]) -> bool:
    """DAWN clinical-core mismatch, by age tier."""
    if core is None or not at_least(nihss_rep, DAWN_NIHSS_MIN):
        return False
    if age == AgeGroup.AGE_80_PLUS:
        return core < DAWN_CORE_AGE_80_PLUS
    if core < DAWN_CORE_UNDER_80:
        return True
    return core < DAWN_CORE_UNDER_80_HIGH and nihss_rep >= DAWN_NIHSS_HIGH


def meets_defuse3(core: Optional[int], mismatch_vol: Optional[int], ratio: Optional[float]) -> bool:
    if core is None or mismatch_vol is None or ratio is None:
        return False
    return (
        core < DEFUSE3_CORE_MAX
        and mismatch_vol >= DEFUSE3_MISMATCH_MIN
        and ratio >= DEFUSE3_RATIO_MIN
    )


def derive_mismatch_ratio(core_text: str, mismatch_text: str) -> Optional[str]:
    """
    Mismatch ratio = (core + mismatch volume) / core, formatted to one decimal.

    The mismatch volume input is the penumbra (difference), so the total
    hypoperfused volume is core + mismatch. Returns None when either value is
    missing or core is not positive.
    """
    core = parse_float_field(core_text)
    mismatch = parse_float_field(mismatch_text)
    if core is None or mismatch is None or core <= 0:
        return None
    return f"{(mismatch + core) / core:.1f}"

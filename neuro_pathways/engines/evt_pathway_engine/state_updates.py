"""
EVT Pathway - State Updates

Single-field mutations of an InputState. States are immutable; every update
returns a new instance. Editing core or mismatch volume re-derives the
mismatch ratio.
"""

from dataclasses import replace

from . import thresholds as th
from .models import InputState, attribute_for, coerce_value


RATIO_SOURCES = ("core", "mismatchVol")


def apply_update(state: InputState, field_id: str, value) -> InputState:
    attr = attribute_for(field_id)
    updated = replace(state, **{attr: coerce_value(field_id, value)})

    if field_id in RATIO_SOURCES:
        ratio = th.derive_mismatch_ratio(updated.core, updated.mismatch_vol)
        if ratio is not None:
            updated = replace(updated, mismatch_ratio=ratio)
    return updated


def reset_state() -> InputState:
    return InputState()

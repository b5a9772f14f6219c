"""
EVT Pathway - Path Selector

Routes an InputState to the classifier matching its occlusion type.
"""

from typing import Optional

from .lvo_rules import LvoRules
from .mevo_rules import MevoRules
from .models import InputState, OcclusionType, PathwayResult


PROTOCOLS = {
    OcclusionType.LVO: LvoRules.evaluate,
    OcclusionType.MEVO: MevoRules.evaluate,
}


def select_protocol(state: InputState) -> Optional[PathwayResult]:
    """Run the matching classifier; None while the occlusion type is unknown."""
    protocol = PROTOCOLS.get(state.occlusion_type)
    if protocol is None:
        return None
    return protocol(state)

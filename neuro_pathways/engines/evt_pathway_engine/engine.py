"""
EVT Pathway Engine

Wraps the pure EVT pathway pipeline in the standard engine contract.

Pipeline:
    1. InputState.from_dict(inputs)      — validate field ids and tags
    2. select_protocol(state)            — LVO / MeVO rule chain
    3. get_next_field(answered, section) — next field to focus
    4. section progress + headlines      — wizard chrome
    5. Returns standard engine contract
"""

from typing import Optional

from neuro_pathways.base_engine import BaseEngine
from neuro_pathways import config
from .field_resolver import FieldFocus, Section, branch_key, get_next_field, ordered_fields
from .models import InputState, MevoLocation, OcclusionType, PathwayInputError, PathwayResult, Status
from .path_selector import select_protocol
from .progress import clamp_section, completed_count, section_complete, section_summary


RESULT_TYPE = "evt_pathway"
CLASSIFICATION = {"intent_type": "evt_pathway"}


def parse_section(raw) -> Section:
    """Active section from the wire (int or numeric string), clamped to 1..4."""
    if raw is None:
        return Section.TRIAGE
    if isinstance(raw, bool):
        raise PathwayInputError(f"Invalid section: {raw!r}")
    try:
        return clamp_section(int(raw))
    except (TypeError, ValueError, OverflowError):
        raise PathwayInputError(f"Invalid section: {raw!r}") from None


class EvtPathwayEngine(BaseEngine):
    """
    Deterministic EVT eligibility pathway.

    Every field mutation re-runs the whole pipeline; there is no cached
    state between calls.
    """

    def __init__(self):
        super().__init__(name="evt_pathway_engine")

    async def run(self, input_data: dict, session_state: dict) -> dict:
        """
        Main engine entry point.

        Args:
            input_data: {
                "inputs": {fieldId: value, ...},
                "answered_field": str | None,
                "active_section": int,
            }

        Returns:
            Standard engine contract via _build_return().
        """
        try:
            state = InputState.from_dict(input_data.get("inputs") or {})
            section = parse_section(input_data.get("active_section"))
            answered = input_data.get("answered_field")
            if answered is not None:
                # validates the id
                state.get(answered)
        except PathwayInputError as e:
            print(f"  [EvtPathwayEngine] Rejected input: {e}")
            return self._build_return(
                status="error",
                result_type=RESULT_TYPE,
                data={
                    "error": str(e),
                    "field": getattr(e, "field_id", None),
                },
                classification=CLASSIFICATION,
                confidence=0.0,
            )

        data = self.evaluate(state, answered, section)
        result = data["result"]

        status = "needs_clarification" if self._needs_clarification(state, result) else "complete"

        print(f"  [EvtPathwayEngine] status={result['status'] if result else None}, "
              f"section={int(section)}, next={data['focus']['next_field']}")

        return self._build_return(
            status=status,
            result_type=RESULT_TYPE,
            data=data,
            classification=CLASSIFICATION,
            confidence=1.0 if status == "complete" else 0.0,
        )

    def evaluate(
        self,
        state: InputState,
        answered_field: Optional[str] = None,
        section: int = Section.TRIAGE,
    ) -> dict:
        """Synchronous core: classify, resolve focus, and summarise progress."""
        result = select_protocol(state)

        if answered_field:
            focus = get_next_field(answered_field, section, state)
        else:
            focus = FieldFocus(None, False)

        if config.PATHWAY_DEBUG:
            print(f"  [EvtPathwayEngine] branch={tuple(v.value for v in branch_key(state))} "
                  f"fields={ordered_fields(section, state)}")
            if result is not None:
                print(f"  [EvtPathwayEngine] {result.status.value}: {result.reason} "
                      f"(criteria={result.criteria_name})")

        return {
            "inputs": state.to_dict(),
            "result": result.to_dict() if result is not None else None,
            "focus": {"next_field": focus.next_field, "is_last": focus.is_last},
            "progress": self._progress(state, result, section),
            "branch": self._branch(state, section),
        }

    @staticmethod
    def _needs_clarification(state: InputState, result: Optional[dict]) -> bool:
        """MeVO results stay provisional until a vessel is chosen."""
        if result is None or result["status"] == Status.INCOMPLETE.value:
            return True
        return (state.occlusion_type == OcclusionType.MEVO
                and state.mevo_location == MevoLocation.UNKNOWN)

    @staticmethod
    def _progress(state: InputState, result: Optional[PathwayResult], section: int) -> dict:
        return {
            "active_section": int(section),
            "completed": completed_count(state, result),
            "total": len(Section),
            "sections": [
                {
                    "section": int(s),
                    "name": s.name.lower(),
                    "complete": section_complete(s, state, result),
                    "summary": section_summary(s, state, result),
                }
                for s in Section
            ],
        }

    @staticmethod
    def _branch(state: InputState, section: int) -> dict:
        key = branch_key(state)
        return {
            "occlusion_type": key.occlusion_type.value,
            "lvo_location": key.lvo_location.value,
            "time": key.time.value,
            "fields": ordered_fields(section, state),
        }

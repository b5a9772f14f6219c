"""
Neuro Pathways - Base Engine Class

BaseEngine: Base for deterministic decision engines (evt_pathway_engine, ...).
Engines run pure Python rule pipelines internally and return structured
data via the standard return contract.
"""


class BaseEngine:
    """Base class for pathway engines."""

    def __init__(self, name: str):
        self.name = name

    async def run(self, input_data: dict, session_state: dict) -> dict:
        """Deterministic pipeline -- override per engine."""
        raise NotImplementedError

    def _build_return(
        self,
        status: str,
        result_type: str,
        data: dict,
        classification: dict,
        confidence: float = 0.9,
    ) -> dict:
        """
        Build the standard return contract that all engines must use.
        API handlers rely on this structure to decide what to send back.
        """
        return {
            "status": status,  # "complete" | "error" | "needs_clarification"
            "engine": self.name,
            "result_type": result_type,
            "data": data,
            "classification": classification,
            "confidence": confidence,
        }

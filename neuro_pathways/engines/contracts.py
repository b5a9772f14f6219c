"""
Engine Contracts — Envelope shapes for pathway engine I/O.

These are documented dict shapes, not classes. Factory functions
ensure consistent construction at the API boundary.
"""


def make_pathway_input(inputs=None, answered_field=None, active_section=None) -> dict:
    """
    Canonical pathway engine input envelope.

    Shape:
        {
            "inputs": {fieldId: value, ...},
            "answered_field": str | None,
            "active_section": int | None,
        }
    """
    return {
        "inputs": inputs or {},
        "answered_field": answered_field,
        "active_section": active_section,
    }


def result_status(engine_output: dict):
    """Result status string from an engine contract, or None when there is no result."""
    result = (engine_output.get("data") or {}).get("result")
    return result["status"] if result else None

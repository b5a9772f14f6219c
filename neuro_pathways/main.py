"""
Neuro Pathways - FastAPI Entry Point

JSON API for the EVT eligibility pathway wizard. Every field update
re-runs the pathway engine and returns the standard engine contract.
"""

from dotenv import load_dotenv
load_dotenv()

from json import JSONDecodeError

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from neuro_pathways.shared.session_state import SessionManager
from neuro_pathways.engines.contracts import make_pathway_input, result_status
from neuro_pathways.engines.evt_pathway_engine.engine import EvtPathwayEngine, parse_section
from neuro_pathways.engines.evt_pathway_engine.models import InputState, PathwayInputError
from neuro_pathways.engines.evt_pathway_engine.path_selector import select_protocol
from neuro_pathways.engines.evt_pathway_engine.progress import next_section, previous_section
from neuro_pathways.engines.evt_pathway_engine.state_updates import apply_update, reset_state
from neuro_pathways.output_agents.emr_note_output import build_emr_note
from neuro_pathways import config


# ── App Setup ─────────────────────────────────────────────────

app = FastAPI(title=config.APP_TITLE)
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

print(f"{config.APP_TITLE} API starting...")

session_manager = SessionManager()
engine = EvtPathwayEngine()


# ── Helpers ───────────────────────────────────────────────────

async def _read_body(request: Request) -> dict:
    """Request JSON body; empty body -> {}."""
    raw = await request.body()
    if not raw:
        return {}
    try:
        data = await request.json()
    except JSONDecodeError:
        raise HTTPException(status_code=400, detail="Body must be JSON")
    if not isinstance(data, dict):
        raise HTTPException(status_code=400, detail="Body must be a JSON object")
    return data


def _require(data: dict, key: str, kind=None):
    if data.get(key) is None:
        raise HTTPException(status_code=400, detail=f"Missing '{key}'")
    if kind is not None and not isinstance(data[key], kind):
        raise HTTPException(status_code=400, detail=f"'{key}' must be a {kind.__name__}")
    return data[key]


def _require_session(session_id: str) -> dict:
    session_state = session_manager.get_session(session_id)
    if session_state is None:
        raise HTTPException(status_code=404, detail=f"Unknown session: {session_id}")
    return session_state


def _log_analytics(contract: dict):
    """Analytics receives only the result status."""
    status = result_status(contract)
    if status:
        print(f"  [Analytics] status={status}")


async def _run_engine(session_state: dict, answered_field: str = None) -> dict:
    contract = await engine.run(
        make_pathway_input(
            inputs=session_state["state"].to_dict(),
            answered_field=answered_field,
            active_section=int(session_state["active_section"]),
        ),
        session_state,
    )
    if contract["status"] == "error":
        raise HTTPException(status_code=400, detail=contract["data"]["error"])
    _log_analytics(contract)
    contract["session_id"] = session_state["session_id"]
    return contract


# ── Endpoints ─────────────────────────────────────────────────

@app.post("/evt/session")
async def create_session(request: Request):
    """Start a wizard session, optionally seeded with inputs."""
    data = await _read_body(request)
    session_manager.purge_expired()

    try:
        seeded = InputState.from_dict(data.get("inputs") or {})
    except PathwayInputError as e:
        raise HTTPException(status_code=400, detail=str(e))

    session_id = session_manager.create_session()
    session_state = session_manager.get_session(session_id)
    session_state["state"] = seeded

    return {
        "session_id": session_id,
        "inputs": seeded.to_dict(),
        "active_section": int(session_state["active_section"]),
    }


@app.post("/evt/update")
async def update_field(request: Request):
    """Apply one field answer and re-evaluate."""
    data = await _read_body(request)
    session_id = _require(data, "session_id", str)
    field_id = _require(data, "field", str)
    value = data.get("value")

    session_state = _require_session(session_id)
    async with session_manager.get_lock(session_id):
        try:
            session_state["state"] = apply_update(session_state["state"], field_id, value)
        except PathwayInputError as e:
            print(f"  [EVT API] Rejected update on {session_id}: {e}")
            raise HTTPException(status_code=400, detail=str(e))
        session_state["last_field"] = field_id
        session_manager.touch(session_state)
        return await _run_engine(session_state, answered_field=field_id)


@app.post("/evt/evaluate")
async def evaluate(request: Request):
    """Stateless evaluation of a full input set."""
    data = await _read_body(request)
    contract = await engine.run(
        make_pathway_input(
            inputs=data.get("inputs"),
            answered_field=data.get("answered_field"),
            active_section=data.get("active_section"),
        ),
        {},
    )
    if contract["status"] == "error":
        raise HTTPException(status_code=400, detail=contract["data"]["error"])
    _log_analytics(contract)
    return contract


@app.post("/evt/section")
async def change_section(request: Request):
    """Wizard navigation: next | back | goto."""
    data = await _read_body(request)
    session_id = _require(data, "session_id", str)
    action = _require(data, "action", str)

    session_state = _require_session(session_id)
    async with session_manager.get_lock(session_id):
        current = session_state["active_section"]
        try:
            if action == "next":
                session_state["active_section"] = next_section(current)
            elif action == "back":
                session_state["active_section"] = previous_section(current)
            elif action == "goto":
                session_state["active_section"] = parse_section(_require(data, "section"))
            else:
                raise HTTPException(status_code=400, detail=f"Unknown action: {action!r}")
        except PathwayInputError as e:
            raise HTTPException(status_code=400, detail=str(e))
        session_manager.touch(session_state)
        return await _run_engine(session_state)


@app.post("/evt/reset")
async def reset(request: Request):
    """Clear every answer and return to the first section."""
    data = await _read_body(request)
    session_id = _require(data, "session_id", str)

    session_state = _require_session(session_id)
    async with session_manager.get_lock(session_id):
        session_state["state"] = reset_state()
        session_state["active_section"] = parse_section(None)
        session_state["last_field"] = None
        session_manager.touch(session_state)
        print(f"  [EVT API] Reset session {session_id}")
        return await _run_engine(session_state)


@app.get("/evt/note/{session_id}")
async def emr_note(session_id: str):
    """Plain-text EMR note for the session's current result."""
    session_state = _require_session(session_id)
    state = session_state["state"]
    return {
        "session_id": session_id,
        "note": build_emr_note(state, select_protocol(state)),
        "guideline_source": config.GUIDELINE_SOURCE,
    }


@app.get("/checker")
async def checker():
    """Health check endpoint."""
    return {"status": "ok", "version": config.API_VERSION}


if __name__ == "__main__":
    print(f"{config.APP_TITLE} listening on {config.API_HOST}:{config.API_PORT}")
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)

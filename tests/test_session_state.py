"""
In-memory session manager and config helpers.
"""

import runpy
from datetime import timedelta

import uvicorn

from neuro_pathways import config
from neuro_pathways.engines.evt_pathway_engine.field_resolver import Section
from neuro_pathways.engines.evt_pathway_engine.models import InputState
from neuro_pathways.shared.session_state import SessionManager


def test_new_session_starts_empty():
    manager = SessionManager(ttl_minutes=30)
    sid = manager.create_session()
    session = manager.get_session(sid)
    assert session["state"] == InputState()
    assert session["active_section"] == Section.TRIAGE
    assert session["last_field"] is None


def test_lock_is_per_session():
    manager = SessionManager(ttl_minutes=30)
    a, b = manager.create_session(), manager.create_session()
    assert manager.get_lock(a) is manager.get_lock(a)
    assert manager.get_lock(a) is not manager.get_lock(b)


def test_idle_sessions_expire():
    manager = SessionManager(ttl_minutes=30)
    stale, fresh = manager.create_session(), manager.create_session()
    manager.sessions[stale]["updated_at"] -= timedelta(minutes=31)

    assert manager.purge_expired() == 1
    assert manager.get_session(stale) is None
    assert manager.get_session(fresh) is not None


def test_touch_keeps_session_alive():
    manager = SessionManager(ttl_minutes=30)
    sid = manager.create_session()
    session = manager.get_session(sid)
    session["updated_at"] -= timedelta(minutes=31)
    manager.touch(session)
    assert manager.get_session(sid) is session


def test_cors_origins_parsing(monkeypatch):
    monkeypatch.setattr(config, "CORS_ORIGINS", "https://a.org, https://b.org")
    assert config.get_cors_origins() == ["https://a.org", "https://b.org"]
    monkeypatch.setattr(config, "CORS_ORIGINS", "")
    assert config.get_cors_origins() == ["*"]


def test_main_launches_uvicorn_with_configured_bind(monkeypatch):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, **kw: calls.append((app, kw)))
    monkeypatch.setattr(config, "API_HOST", "127.0.0.1")
    monkeypatch.setattr(config, "API_PORT", 9100)

    runpy.run_module("neuro_pathways.main", run_name="__main__")

    assert len(calls) == 1
    app, kwargs = calls[0]
    assert kwargs == {"host": "127.0.0.1", "port": 9100}
    assert any(route.path == "/checker" for route in app.routes)

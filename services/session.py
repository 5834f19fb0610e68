"""Session helpers: the single AppState, the navigation stack, per-screen state.

All helpers take the session mapping explicitly (st.session_state in the app,
a plain dict in tests).
"""
from __future__ import annotations
import logging
from typing import Any, List, MutableMapping, Optional

from domain.models import AppState, Project, Screen
from services.backend import CamsBackend, StubBackend
from services.navigation import NavigationStack, entry_screen
from services.password_reset import PasswordResetSession

logger = logging.getLogger(__name__)

APP_STATE_KEY = "app_state"
NAV_KEY = "nav"
BACKEND_KEY = "backend"
RESET_KEY = "reset_session"
PROJECTS_KEY = "projects"
DRAFT_PROJECT_KEY = "draft_project"


def get_app_state(session: MutableMapping[str, Any]) -> AppState:
    if APP_STATE_KEY not in session:
        session[APP_STATE_KEY] = AppState()
    return session[APP_STATE_KEY]


def get_backend(session: MutableMapping[str, Any]) -> CamsBackend:
    if BACKEND_KEY not in session:
        session[BACKEND_KEY] = StubBackend()
    return session[BACKEND_KEY]


def get_navigation(session: MutableMapping[str, Any]) -> NavigationStack:
    if NAV_KEY not in session:
        nav = NavigationStack(entry_screen(get_app_state(session)))
        nav.add_pop_listener(lambda screen: release_screen(session, screen))
        session[NAV_KEY] = nav
    return session[NAV_KEY]


def widget_key(screen: Screen, name: str) -> str:
    return f"{screen.value}_{name}"


def release_screen(session: MutableMapping[str, Any], screen: Screen):
    """Drop widget values and owned resources of a screen that left the stack."""
    if screen == Screen.FORGOT_PASSWORD:
        reset: Optional[PasswordResetSession] = session.pop(RESET_KEY, None)
        if reset is not None:
            reset.close()
    if screen == Screen.MAP_SELECTION:
        session.pop(DRAFT_PROJECT_KEY, None)
    prefix = f"{screen.value}_"
    for k in [k for k in list(session.keys()) if isinstance(k, str) and k.startswith(prefix)]:
        del session[k]
    logger.debug("released state for %s", screen.value)


def get_reset_session(session: MutableMapping[str, Any]) -> PasswordResetSession:
    if RESET_KEY not in session:
        session[RESET_KEY] = PasswordResetSession(get_backend(session))
    return session[RESET_KEY]


def get_projects(session: MutableMapping[str, Any]) -> List[Project]:
    if PROJECTS_KEY not in session:
        session[PROJECTS_KEY] = []
    return session[PROJECTS_KEY]


def set_draft_project(session: MutableMapping[str, Any], project: Project):
    session[DRAFT_PROJECT_KEY] = project


def get_draft_project(session: MutableMapping[str, Any]) -> Optional[Project]:
    return session.get(DRAFT_PROJECT_KEY)

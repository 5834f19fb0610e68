import logging

import streamlit as st

from domain.constants import APP_SUBTITLE, APP_TITLE
from domain.models import Screen
from services.session import get_app_state, get_navigation
from ui.components import inject_base_css

from views import login, register, forgot_password, change_password, project_list, add_project, map_selection

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("cams")

# --- Page Registry ---
# Maps a screen to its label and rendering function.
PAGE_REGISTRY = {
    Screen.LOGIN: {
        "label": "Login",
        "render_func": login.view,
    },
    Screen.REGISTER: {
        "label": "Create Account",
        "render_func": register.view,
    },
    Screen.FORGOT_PASSWORD: {
        "label": "Reset Password",
        "render_func": forgot_password.view,
    },
    Screen.CHANGE_PASSWORD: {
        "label": "Change Password",
        "render_func": change_password.view,
    },
    Screen.PROJECT_LIST: {
        "label": "Your Projects",
        "render_func": project_list.view,
    },
    Screen.ADD_PROJECT: {
        "label": "New Project",
        "render_func": add_project.view,
    },
    Screen.MAP_SELECTION: {
        "label": "Select Area",
        "render_func": map_selection.view,
    },
}


def render_back_button(nav):
    if nav.depth <= 1:
        return
    previous = nav.screens[-2]
    if st.button(f"‹ {PAGE_REGISTRY[previous]['label']}", key="nav_back"):
        nav.pop()
        st.rerun()


def main():
    """
    Main application router.

    Renders whichever screen is on top of the session's navigation stack.
    The stack and the shared AppState are created on the first run of a
    browser session and live for the rest of it.
    """
    st.set_page_config(page_title=APP_TITLE, page_icon="🛰️", layout="centered")
    inject_base_css()

    app_state = get_app_state(st.session_state)
    nav = get_navigation(st.session_state)

    st.caption(APP_SUBTITLE)
    render_back_button(nav)

    screen = nav.top
    if screen not in PAGE_REGISTRY:
        logger.warning("unknown screen %s, returning to login", screen)
        nav.reset(Screen.LOGIN)
        st.rerun()
    PAGE_REGISTRY[screen]["render_func"]()

    st.sidebar.caption(
        " › ".join(PAGE_REGISTRY[s]["label"] for s in nav.screens)
        + (" | logged out" if app_state.is_logged_out else "")
    )


if __name__ == "__main__":
    main()

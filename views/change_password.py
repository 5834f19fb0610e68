import logging

import streamlit as st

from domain.models import Screen
from services.forms import evaluate_change_password
from services.session import get_app_state, get_backend, get_navigation, widget_key
from ui.components import field_error, secure_input

logger = logging.getLogger(__name__)


def view():
    st.header("Change Password")
    nav = get_navigation(st.session_state)

    new_password = secure_input("New Password", key=widget_key(Screen.CHANGE_PASSWORD, "password"))
    password_slot = st.empty()
    confirm = secure_input("Confirm New Password", key=widget_key(Screen.CHANGE_PASSWORD, "confirm"))

    status = evaluate_change_password(new_password, confirm)
    with password_slot:
        field_error(status.error_for("password"))
    field_error(status.error_for("confirm_password"))

    if st.button("Submit", type="primary", disabled=not status.can_submit):
        result = get_backend(st.session_state).change_password(new_password)
        if not result.ok:
            st.error(result.error.message)
            return
        get_app_state(st.session_state).is_logged_out = True
        logger.info("password changed; returning to login")
        nav.pop_to(Screen.LOGIN)
        st.rerun()

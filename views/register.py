import logging

import streamlit as st

from domain.models import RegistrationForm, Screen
from services.forms import evaluate_registration
from services.session import get_backend, get_navigation, widget_key
from ui.components import field_error, secure_input

logger = logging.getLogger(__name__)


def view():
    st.header("Create Account")
    nav = get_navigation(st.session_state)

    email = st.text_input("Email", key=widget_key(Screen.REGISTER, "email"),
                          placeholder="Email", label_visibility="collapsed")
    email_slot = st.empty()

    password = secure_input("Password", key=widget_key(Screen.REGISTER, "password"))
    password_slot = st.empty()

    confirm = secure_input("Confirm Password", key=widget_key(Screen.REGISTER, "confirm_password"))
    confirm_slot = st.empty()

    api_key = st.text_input("PlanetScope API Key", key=widget_key(Screen.REGISTER, "api_key"),
                            placeholder="PlanetScope API Key", label_visibility="collapsed").strip()

    form = RegistrationForm(email=email, password=password, confirm_password=confirm, api_key=api_key)
    status = evaluate_registration(form)
    with email_slot:
        field_error(status.error_for("email"))
    with password_slot:
        field_error(status.error_for("password"))
    with confirm_slot:
        field_error(status.error_for("confirm_password"))

    if st.button("Register", type="primary", disabled=not status.can_submit):
        result = get_backend(st.session_state).register(form.email, form.password, form.api_key)
        if result.ok:
            st.toast("Account created. You can log in now.")
            nav.pop_to(Screen.LOGIN)
            st.rerun()
        else:
            logger.info("registration rejected: %s", result.error)
            st.error(result.error.message)

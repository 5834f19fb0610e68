import streamlit as st

from domain.constants import APP_TITLE
from domain.models import Credentials, Screen
from services.forms import evaluate_login
from services.session import get_navigation, widget_key
from ui.components import field_error, secure_input


def view():
    st.header(f"{APP_TITLE} Login")
    nav = get_navigation(st.session_state)

    email = st.text_input("Email", key=widget_key(Screen.LOGIN, "email"),
                          placeholder="Email", label_visibility="collapsed")
    email_slot = st.empty()
    password = secure_input("Password", key=widget_key(Screen.LOGIN, "password"))

    status = evaluate_login(Credentials(email=email, password=password))
    with email_slot:
        field_error(status.error_for("email"))
    field_error(status.error_for("password"))

    if st.button("Login", type="primary", disabled=not status.can_submit):
        nav.push(Screen.PROJECT_LIST)
        st.rerun()

    if st.button("Forgot Password?"):
        nav.push(Screen.FORGOT_PASSWORD)
        st.rerun()

    if st.button("Create Account"):
        nav.push(Screen.REGISTER)
        st.rerun()

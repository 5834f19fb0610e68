import streamlit as st

from domain.models import Screen
from services.session import get_navigation, get_reset_session, widget_key
from services.validation import email_error
from ui.components import field_error


def _send_label(reset) -> str:
    if reset.can_resend_code:
        return "Resend Code" if reset.code_sent else "Send Code"
    return f"Resend Code in {reset.seconds_remaining}s"


@st.fragment(run_every=1)
def _send_code_button():
    # Reruns every second so the countdown label and the gate stay current.
    reset = get_reset_session(st.session_state)
    reset.refresh()
    if st.button(_send_label(reset), type="primary", disabled=not reset.can_send(),
                 key=widget_key(Screen.FORGOT_PASSWORD, "send")):
        result = reset.send_code()
        if result.ok:
            st.rerun()
        else:
            st.error(result.error.message)


def view():
    st.header("Reset Password")
    nav = get_navigation(st.session_state)
    reset = get_reset_session(st.session_state)

    reset.email = st.text_input("Email", key=widget_key(Screen.FORGOT_PASSWORD, "email"),
                                placeholder="Email", label_visibility="collapsed")
    field_error(email_error(reset.email))

    _send_code_button()

    if not reset.code_sent:
        return

    reset.verification_code = st.text_input(
        "Enter Code", key=widget_key(Screen.FORGOT_PASSWORD, "code"),
        placeholder="Enter Code", label_visibility="collapsed").strip()

    if st.button("Submit", disabled=not reset.can_submit_code()):
        result = reset.submit_code()
        if result.ok:
            nav.push(Screen.CHANGE_PASSWORD)
            st.rerun()
        else:
            st.error(result.error.message)

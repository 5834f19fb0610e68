import streamlit as st


def secure_input(label: str, key: str) -> str:
    """Password input with a show/hide toggle next to it.

    The toggle state is kept under `<key>_visible` so it is released with the
    rest of the screen's widget keys.
    """
    visible_key = f"{key}_visible"
    col_input, col_toggle = st.columns([5, 1])
    with col_toggle:
        st.write("")
        visible = st.toggle("👁", key=visible_key, help="Show / hide")
    with col_input:
        return st.text_input(
            label,
            key=key,
            type="default" if visible else "password",
            placeholder=label,
            label_visibility="collapsed",
        )

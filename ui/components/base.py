import streamlit as st
from typing import Optional

GREEN = "#059669"  # emerald-600
YELLOW = "#D97706"  # amber-600
RED = "#DC2626"  # red-600
CHIP_BG = "#374151"


def inject_base_css():
    """Page-wide styles; call once per script run (the router does)."""
    st.markdown(
        f"""
        <style>
        .block-container {{max-width: 520px; padding-top: 1.5rem;}}
        .field-error {{color:{RED}; font-size:12px; margin:-0.6rem 0 0.6rem 0.1rem;}}
        .badge {{
            display:inline-block; padding:2px 8px; border-radius:12px;
            font-size:12px; line-height:16px; font-weight:600;
            background:{CHIP_BG}; color:#F9FAFB; margin-right:4px;
        }}
        .badge.green {{background:{GREEN};}}
        .badge.yellow {{background:{YELLOW};}}
        div.stButton > button {{width:100%;}}
        </style>
        """,
        unsafe_allow_html=True,
    )


def field_error(message: Optional[str]):
    """Red caption under a field; renders nothing when there is no message."""
    if message:
        st.markdown(f"<div class='field-error'>{message}</div>", unsafe_allow_html=True)


def status_badge(status: str) -> str:
    cls = "green" if status.lower() in {"done", "running"} else "yellow"
    return f'<span class="badge {cls}">{status}</span>'

import datetime as dt

import streamlit as st

from domain.models import Screen
from services.forms import evaluate_new_project
from services.projects import new_project
from services.session import get_navigation, set_draft_project, widget_key
from services.validation import today_in_reference_zone
from ui.components import field_error


def view():
    st.header("New Project")
    nav = get_navigation(st.session_state)
    today = today_in_reference_zone()

    name = st.text_input("Project Name", key=widget_key(Screen.ADD_PROJECT, "name")).strip()
    crop_name = st.text_input("Crop Name", key=widget_key(Screen.ADD_PROJECT, "crop")).strip()
    start_date = st.date_input("Start Date", value=today - dt.timedelta(days=30), key=widget_key(Screen.ADD_PROJECT, "start"))
    end_date = st.date_input("End Date", value=today, key=widget_key(Screen.ADD_PROJECT, "end"))

    status = evaluate_new_project(name, crop_name, start_date, end_date,
                                  dt.datetime.now(dt.timezone.utc))
    field_error(status.error_for("dates"))

    if st.button("Submit", type="primary", disabled=not status.can_submit):
        set_draft_project(st.session_state, new_project(name, crop_name, start_date, end_date))
        nav.push(Screen.MAP_SELECTION)
        st.rerun()

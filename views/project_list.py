import pandas as pd
import streamlit as st

from domain.models import Screen
from services.projects import project_rows
from services.session import get_navigation, get_projects
from ui.components import project_card


def view():
    st.header("Your Projects")
    nav = get_navigation(st.session_state)
    projects = get_projects(st.session_state)

    if not projects:
        st.caption("No projects yet. Add one to request satellite imagery for a field.")
    else:
        for project in reversed(projects):
            project_card(project)
        with st.expander("Table view"):
            st.dataframe(pd.DataFrame(project_rows(projects)), hide_index=True, use_container_width=True)

    if st.button("+ Add New Project", type="primary"):
        nav.push(Screen.ADD_PROJECT)
        st.rerun()

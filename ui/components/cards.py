import streamlit as st

from domain.models import Project
from ui.components.base import status_badge


def project_card(project: Project):
    """
    Displays one project with its crop, date range and imagery job state.
    """
    status = project.imagery_job.status if project.imagery_job else "Draft"
    vertices = len(project.area) if project.area else 0
    with st.container(border=True):
        st.markdown(
            f"**{project.name}** &nbsp; {status_badge(status)}",
            unsafe_allow_html=True,
        )
        st.caption(
            f"🌱 {project.crop_name} · 📅 {project.start_date:%Y-%m-%d} → {project.end_date:%Y-%m-%d}"
            f" · 📍 {vertices} points"
        )
        if project.imagery_job:
            st.caption(f"Job `{project.imagery_job.job_id}` submitted {project.imagery_job.submitted_at}")

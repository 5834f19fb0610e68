import folium
from folium.plugins import Draw
import streamlit as st
from streamlit_folium import st_folium

from domain.constants import MAP_CENTER, MAP_HEIGHT, MAP_ZOOM
from domain.models import Screen
from services.area import area_from_map_state
from services.projects import request_imagery
from services.session import get_backend, get_draft_project, get_navigation, get_projects, widget_key


def build_map() -> folium.Map:
    m = folium.Map(location=list(MAP_CENTER), zoom_start=MAP_ZOOM, control_scale=True)
    folium.TileLayer(
        tiles="https://server.arcgisonline.com/ArcGIS/rest/services/World_Imagery/MapServer/tile/{z}/{y}/{x}",
        attr="Esri", name="Satellite", overlay=False, control=True,
    ).add_to(m)
    Draw(
        export=False,
        draw_options={
            "polyline": False, "circle": False, "circlemarker": False, "marker": False,
            "polygon": True, "rectangle": True,
        },
        edit_options={"edit": True, "remove": True},
    ).add_to(m)
    folium.LayerControl(collapsed=True).add_to(m)
    return m


def view():
    st.header("Select Area")
    nav = get_navigation(st.session_state)
    project = get_draft_project(st.session_state)
    if project is None:
        st.warning("No project in progress. Start a new project first.")
        if st.button("Back to projects"):
            nav.pop_to(Screen.PROJECT_LIST)
            st.rerun()
        return

    st.caption(f"{project.name} · {project.crop_name} · {project.start_date:%Y-%m-%d} → {project.end_date:%Y-%m-%d}")
    map_state = st_folium(build_map(), height=MAP_HEIGHT, use_container_width=True,
                          key=widget_key(Screen.MAP_SELECTION, "map"))
    area = area_from_map_state(map_state)
    st.caption(f"{len(area)} points selected")

    if st.button("Confirm Selection", type="primary"):
        result = request_imagery(get_backend(st.session_state), project, area, get_projects(st.session_state))
        if not result.ok:
            st.error(result.error.message)
            return
        st.toast(f"Imagery requested (job {result.value.job_id})")
        nav.pop_to(Screen.PROJECT_LIST)
        st.rerun()

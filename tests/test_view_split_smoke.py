from unittest.mock import patch, MagicMock

# Mock streamlit before importing the app
st_mock = MagicMock()
MOCKED = {"streamlit": st_mock, "streamlit_folium": MagicMock()}


def _registry():
    with patch.dict("sys.modules", MOCKED):
        from app import PAGE_REGISTRY
        from domain.models import Screen
    return PAGE_REGISTRY, Screen


def test_page_registry_structure():
    """
    Tests that the PAGE_REGISTRY has the correct structure.
    """
    registry, _ = _registry()
    assert isinstance(registry, dict)
    for key, value in registry.items():
        assert "label" in value
        assert set(value) == {"label", "render_func"}


def test_every_screen_is_registered():
    registry, Screen = _registry()
    assert {s.value for s in registry} == {s.value for s in Screen}


def test_all_render_functions_are_callable():
    """
    Ensures that every screen in the registry points to a callable function.
    """
    registry, _ = _registry()
    for screen, page_config in registry.items():
        assert callable(page_config["render_func"]), f"Render function for '{screen}' is not callable."


def test_map_view_uses_streamlit_folium_at_import():
    with patch.dict("sys.modules", MOCKED):
        from views import map_selection
        assert map_selection.st_folium is MOCKED["streamlit_folium"].st_folium

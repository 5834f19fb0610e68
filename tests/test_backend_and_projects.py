import datetime as dt

from domain.errors import AuthError, ImageryError
from domain.models import AreaSelection, Coordinate
from services.area import area_from_geojson, area_from_map_state
from services.backend import StubBackend
from services.projects import new_project, project_rows, request_imagery

SQUARE = {
    "type": "Feature",
    "properties": {},
    "geometry": {
        "type": "Polygon",
        "coordinates": [[
            [-122.45, 37.76], [-122.40, 37.76], [-122.40, 37.79], [-122.45, 37.79], [-122.45, 37.76],
        ]],
    },
}


def test_stub_register_rejects_bad_input():
    backend = StubBackend()
    assert backend.register("grower@farm.io", "Abcdef1!", "key").ok
    result = backend.register("grower@farm.io", "Abcdef1!", "")
    assert not result.ok
    assert isinstance(result.error, AuthError)
    assert result.error.code == "missing_api_key"
    assert backend.register("grower", "Abcdef1!", "key").error.code == "invalid_email"


def test_stub_reset_and_change_password():
    backend = StubBackend()
    assert backend.request_password_reset_code("grower@farm.io").ok
    assert not backend.verify_reset_code("grower@farm.io", "  ").ok
    assert backend.change_password("Abcdef1!").ok
    assert backend.change_password("abc").error.code == "weak_password"


def test_polygon_feature_to_area():
    area = area_from_geojson(SQUARE)
    assert len(area) == 4
    assert area.coordinates[0] == Coordinate(latitude=37.76, longitude=-122.45)


def test_map_state_prefers_last_active_drawing():
    line = {"type": "Feature", "geometry": {"type": "LineString", "coordinates": [[1.0, 2.0], [3.0, 4.0]]}}
    state = {"last_active_drawing": SQUARE, "all_drawings": [line]}
    assert len(area_from_map_state(state)) == 4
    state = {"last_active_drawing": None, "all_drawings": [SQUARE, line]}
    assert area_from_map_state(state).coordinates == [Coordinate(2.0, 1.0), Coordinate(4.0, 3.0)]
    assert area_from_map_state(None).is_empty()
    assert area_from_map_state({"all_drawings": None}).is_empty()


def test_imagery_needs_an_area():
    backend = StubBackend()
    result = backend.request_satellite_imagery([], dt.date(2024, 1, 1), dt.date(2024, 2, 1))
    assert not result.ok
    assert isinstance(result.error, ImageryError)
    assert result.error.code == "empty_area"


def test_imagery_rejects_future_end():
    backend = StubBackend()
    area = area_from_geojson(SQUARE).coordinates
    future = dt.date.today() + dt.timedelta(days=400)
    result = backend.request_satellite_imagery(area, dt.date(2024, 1, 1), future)
    assert result.error.code == "invalid_dates"


def test_request_imagery_records_project():
    projects = []
    project = new_project("  North field ", "Corn", dt.date(2024, 1, 1), dt.date(2024, 2, 1))
    assert project.name == "North field"
    result = request_imagery(StubBackend(), project, area_from_geojson(SQUARE), projects)
    assert result.ok
    assert result.value.job_id.startswith("job_")
    assert projects == [project]
    assert project.imagery_job is result.value

    # submitting again does not duplicate the project
    request_imagery(StubBackend(), project, area_from_geojson(SQUARE), projects)
    assert len(projects) == 1

    rows = project_rows(projects)
    assert rows[0]["vertices"] == 4
    assert rows[0]["status"] == "Queued"


def test_failed_request_leaves_project_unsaved():
    projects = []
    project = new_project("South field", "Wheat", dt.date(2024, 1, 1), dt.date(2024, 2, 1))
    result = request_imagery(StubBackend(), project, AreaSelection(), projects)
    assert not result.ok
    assert projects == []
    assert project.imagery_job is None

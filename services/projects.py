"""Project wizard helpers (session-local, nothing is persisted)."""
from __future__ import annotations
import datetime as dt
import logging
from typing import List

from domain.models import AreaSelection, Project, Result
from services.backend import CamsBackend
from utils.ids import create_id_with_prefix

logger = logging.getLogger(__name__)


def new_project(name: str, crop_name: str, start_date: dt.date, end_date: dt.date) -> Project:
    return Project(
        id=create_id_with_prefix('p'),
        name=name.strip(),
        crop_name=crop_name.strip(),
        start_date=start_date,
        end_date=end_date,
    )


def request_imagery(backend: CamsBackend, project: Project, area: AreaSelection,
                    projects: List[Project]) -> Result:
    """Submit the drawn area for the project's dates; on success record the project."""
    result = backend.request_satellite_imagery(area.coordinates, project.start_date, project.end_date)
    if not result.ok:
        return result
    project.area = area
    project.imagery_job = result.value
    if not any(p.id == project.id for p in projects):
        projects.append(project)
    logger.info("project %s saved with imagery job %s", project.id, result.value.job_id)
    return result


def project_rows(projects: List[Project]) -> List[dict]:
    return [
        {
            'name': p.name,
            'crop': p.crop_name,
            'start': p.start_date.isoformat(),
            'end': p.end_date.isoformat(),
            'vertices': len(p.area) if p.area else 0,
            'job': p.imagery_job.job_id if p.imagery_job else '',
            'status': p.imagery_job.status if p.imagery_job else 'Draft',
        }
        for p in projects
    ]

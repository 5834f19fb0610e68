"""Boundary to the account and imagery services.

Screens only talk to a CamsBackend. StubBackend is the in-app implementation:
it checks its inputs the same way the forms do and answers locally, so the
flows can be exercised end to end without any network access.
"""
from __future__ import annotations
import datetime as dt
import logging
from abc import ABC, abstractmethod
from typing import Sequence

from domain.constants import MIN_AREA_VERTICES
from domain.errors import AuthError, ImageryError
from domain.models import Coordinate, JobHandle, Result
from services.validation import is_valid_email, is_valid_password, validate_project_dates
from utils.ids import create_id_with_prefix

logger = logging.getLogger(__name__)


class CamsBackend(ABC):
    @abstractmethod
    def register(self, email: str, password: str, api_key: str) -> Result[None]:
        ...

    @abstractmethod
    def request_password_reset_code(self, email: str) -> Result[None]:
        ...

    @abstractmethod
    def verify_reset_code(self, email: str, code: str) -> Result[None]:
        ...

    @abstractmethod
    def change_password(self, new_password: str) -> Result[None]:
        ...

    @abstractmethod
    def request_satellite_imagery(self, area: Sequence[Coordinate], start_date: dt.date,
                                  end_date: dt.date) -> Result[JobHandle]:
        ...


class StubBackend(CamsBackend):
    def register(self, email, password, api_key):
        if not is_valid_email(email):
            return Result.failure(AuthError("Please enter a valid email", code="invalid_email"))
        if not is_valid_password(password):
            return Result.failure(AuthError("Password does not meet the policy", code="weak_password"))
        if not api_key:
            return Result.failure(AuthError("A PlanetScope API key is required", code="missing_api_key"))
        logger.info("registration accepted for %s", email)
        return Result.success()

    def request_password_reset_code(self, email):
        if not is_valid_email(email):
            return Result.failure(AuthError("Please enter a valid email", code="invalid_email"))
        logger.info("reset code requested for %s", email)
        return Result.success()

    def verify_reset_code(self, email, code):
        if not code or not code.strip():
            return Result.failure(AuthError("Enter the code from your email", code="missing_code"))
        logger.info("reset code accepted for %s", email)
        return Result.success()

    def change_password(self, new_password):
        if not is_valid_password(new_password):
            return Result.failure(AuthError("Password does not meet the policy", code="weak_password"))
        logger.info("password changed")
        return Result.success()

    def request_satellite_imagery(self, area, start_date, end_date):
        if len(area) < MIN_AREA_VERTICES:
            return Result.failure(ImageryError(
                f"Draw an area with at least {MIN_AREA_VERTICES} points on the map", code="empty_area"))
        if start_date >= end_date:
            return Result.failure(ImageryError(
                "Start date must be earlier than end date", code="invalid_dates"))
        check = validate_project_dates(start_date, end_date, dt.datetime.now(dt.timezone.utc))
        if not check.ok:
            return Result.failure(ImageryError(check.reason, code="invalid_dates"))
        job = JobHandle(job_id=create_id_with_prefix('job'))
        logger.info("imagery job %s queued for %d vertices, %s..%s",
                    job.job_id, len(area), start_date, end_date)
        return Result.success(job)

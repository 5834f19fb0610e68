from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, List, Optional, Tuple, TypeVar
import datetime as _dt

from domain.errors import CamsError


def _now_iso():
    return _dt.datetime.now(_dt.timezone.utc).replace(microsecond=0).isoformat().replace('+00:00', 'Z')


class Screen(str, Enum):
    LOGIN = "login"
    REGISTER = "register"
    FORGOT_PASSWORD = "forgot_password"
    CHANGE_PASSWORD = "change_password"
    PROJECT_LIST = "project_list"
    ADD_PROJECT = "add_project"
    MAP_SELECTION = "map_selection"


class ResetStage(str, Enum):
    IDLE = "idle"
    CODE_SENT = "code_sent"
    AWAITING_VERIFICATION = "awaiting_verification"


@dataclass
class Credentials:
    email: str = ""
    password: str = ""


@dataclass
class RegistrationForm(Credentials):
    confirm_password: str = ""
    api_key: str = ""


@dataclass
class Coordinate:
    latitude: float
    longitude: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)


@dataclass
class AreaSelection:
    coordinates: List[Coordinate] = field(default_factory=list)

    def __len__(self):
        return len(self.coordinates)

    def is_empty(self) -> bool:
        return not self.coordinates


@dataclass
class JobHandle:
    job_id: str
    submitted_at: str = field(default_factory=_now_iso)
    status: str = 'Queued'  # Queued | Running | Done


@dataclass
class Project:
    id: str
    name: str
    crop_name: str
    start_date: _dt.date
    end_date: _dt.date
    area: Optional[AreaSelection] = None
    imagery_job: Optional[JobHandle] = None
    created_at: str = field(default_factory=_now_iso)


@dataclass
class AppState:
    """Process-wide state shared by the router and the change-password screen.

    Created once per browser session and never torn down.
    """
    is_logged_out: bool = False


T = TypeVar("T")


@dataclass
class Result(Generic[T]):
    ok: bool
    value: Optional[T] = None
    error: Optional[CamsError] = None

    @classmethod
    def success(cls, value: Any = None) -> "Result":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: CamsError) -> "Result":
        return cls(ok=False, error=error)

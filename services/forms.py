"""Submit gates and inline errors for each form.

Each `evaluate_*` helper returns a FormStatus: whether the submit action is
allowed and which field-level messages to show. Re-evaluating the same form
values always gives the same FormStatus.
"""
from __future__ import annotations
import datetime as dt
from dataclasses import dataclass, field
from typing import Dict, Optional

from domain.models import Credentials, RegistrationForm
from services.validation import (
    is_valid_email,
    is_valid_password,
    email_error,
    password_error,
    mismatch_error,
    validate_project_dates,
)


@dataclass(frozen=True)
class FormStatus:
    can_submit: bool
    errors: Dict[str, str] = field(default_factory=dict)

    def error_for(self, name: str) -> Optional[str]:
        return self.errors.get(name)


def _collect(**messages: Optional[str]) -> Dict[str, str]:
    return {k: v for k, v in messages.items() if v}


def login_gate(form: Credentials) -> bool:
    return is_valid_email(form.email) and is_valid_password(form.password)


def evaluate_login(form: Credentials) -> FormStatus:
    return FormStatus(
        can_submit=login_gate(form),
        errors=_collect(email=email_error(form.email),
                        password=password_error(form.password)),
    )


def registration_gate(form: RegistrationForm) -> bool:
    return (
        is_valid_email(form.email)
        and is_valid_password(form.password)
        and form.password == form.confirm_password
        and bool(form.api_key)
    )


def evaluate_registration(form: RegistrationForm) -> FormStatus:
    return FormStatus(
        can_submit=registration_gate(form),
        errors=_collect(
            email=email_error(form.email),
            password=password_error(form.password),
            confirm_password=mismatch_error(form.password, form.confirm_password),
        ),
    )


def send_code_gate(email: str, can_resend_code: bool) -> bool:
    return can_resend_code and is_valid_email(email)


def submit_code_gate(code: str) -> bool:
    return bool(code)


def change_password_gate(new_password: str, confirmation: str) -> bool:
    return is_valid_password(new_password) and new_password == confirmation


def evaluate_change_password(new_password: str, confirmation: str) -> FormStatus:
    return FormStatus(
        can_submit=change_password_gate(new_password, confirmation),
        errors=_collect(
            password=password_error(new_password),
            confirm_password=mismatch_error(new_password, confirmation),
        ),
    )


def evaluate_new_project(name: str, crop_name: str, start: dt.date, end: dt.date, now: dt.datetime) -> FormStatus:
    check = validate_project_dates(start, end, now)
    return FormStatus(
        can_submit=check.ok and bool(name) and bool(crop_name),
        errors=_collect(dates=check.reason),
    )

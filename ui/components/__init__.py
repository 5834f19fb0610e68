"""
Reusable UI components for the CAMS screens.

- `base`: CSS injection, inline field errors and status badges.
- `secure_field`: password input with a show/hide toggle.
- `cards`: project summary cards for the project list.

Import from here (`from ui.components import field_error`) rather than the
individual modules.
"""

from .base import (
    inject_base_css,
    field_error,
    status_badge,
)

from .secure_field import secure_input

from .cards import project_card

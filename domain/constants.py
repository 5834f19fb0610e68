"""
Centralized constants for the CAMS client, kept in one place so every screen
validates and labels things the same way.

A few values can be overridden from the environment for local testing.
"""
import os

APP_TITLE = "CAMS"
APP_SUBTITLE = "Crop monitoring with satellite imagery"

# --- Validation patterns ---
EMAIL_PATTERN = r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,64}"
PASSWORD_SYMBOLS = "@$!%*?&"
PASSWORD_PATTERN = (
    r"(?=.*[A-Z])(?=.*[a-z])(?=.*[0-9])(?=.*[@$!%*?&])[A-Za-z0-9@$!%*?&]{8,}"
)
PASSWORD_MIN_LENGTH = 8

# --- Password reset ---
RESEND_COOLDOWN_SECONDS = int(os.getenv("CAMS_RESEND_COOLDOWN_SECONDS", "30"))

# --- Project dates ---
# End dates are compared against "today" in this zone regardless of the device zone.
REFERENCE_TIMEZONE = os.getenv("CAMS_REFERENCE_TZ", "America/Chicago")

# --- Map selection ---
MAP_CENTER = (
    float(os.getenv("CAMS_MAP_CENTER_LAT", "37.7749")),
    float(os.getenv("CAMS_MAP_CENTER_LON", "-122.4194")),
)
MAP_ZOOM = 12  # roughly a 0.1 degree span
MAP_HEIGHT = 400
MIN_AREA_VERTICES = 3

# --- Inline advisory messages ---
MSG_INVALID_EMAIL = "Please enter a valid email"
MSG_INVALID_PASSWORD = (
    "Password must have at least 8 characters, one uppercase, one lowercase, "
    "one number, and one special character"
)
MSG_PASSWORD_MISMATCH = "Passwords do not match"
MSG_START_AFTER_END = "Start date must be earlier than end date"
MSG_END_IN_FUTURE = "End date cannot be in the future"

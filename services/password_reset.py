"""Forgot-password flow state for one Forgot-Password screen instance."""
from __future__ import annotations
import logging
import time
from typing import Optional

from domain.constants import RESEND_COOLDOWN_SECONDS
from domain.errors import AuthError
from domain.models import ResetStage, Result
from services.backend import CamsBackend
from services.cooldown import Clock, CooldownTimer
from services.forms import send_code_gate, submit_code_gate

logger = logging.getLogger(__name__)


class PasswordResetSession:
    """Owns the reset stage, the entered code and the single cooldown timer.

    Stages: IDLE -> CODE_SENT -> AWAITING_VERIFICATION. A failed verification
    drops back to CODE_SENT; a successful one leaves `verified` set so the
    screen can push Change-Password.
    """

    def __init__(self, backend: CamsBackend, clock: Clock = time.monotonic,
                 cooldown_seconds: int = RESEND_COOLDOWN_SECONDS):
        self.backend = backend
        self.email = ""
        self.verification_code = ""
        self.stage = ResetStage.IDLE
        self.can_resend_code = True
        self.verified = False
        self.timer: Optional[CooldownTimer] = None
        self._clock = clock
        self._cooldown_seconds = cooldown_seconds

    @property
    def code_sent(self) -> bool:
        return self.stage != ResetStage.IDLE

    @property
    def seconds_remaining(self) -> int:
        if self.timer is None:
            return self._cooldown_seconds
        return self.timer.seconds_remaining

    def can_send(self) -> bool:
        return send_code_gate(self.email, self.can_resend_code)

    def can_submit_code(self) -> bool:
        return self.code_sent and submit_code_gate(self.verification_code)

    def send_code(self) -> Result:
        """Request a code and start the cooldown. Ignored while the gate is closed."""
        if not self.can_send():
            return Result.failure(AuthError("Code cannot be sent right now", code="gate_closed"))
        result = self.backend.request_password_reset_code(self.email)
        if not result.ok:
            logger.info("reset code request failed for %s: %s", self.email, result.error)
            return result
        if self.stage == ResetStage.IDLE:
            self.stage = ResetStage.CODE_SENT
        self.start_cooldown()
        return result

    def start_cooldown(self) -> CooldownTimer:
        # Replace, never stack, the running timer.
        if self.timer is not None:
            self.timer.cancel()
        self.can_resend_code = False
        self.timer = CooldownTimer(self._cooldown_seconds, clock=self._clock,
                                   on_finish=self._cooldown_finished)
        return self.timer

    def _cooldown_finished(self):
        self.can_resend_code = True

    def refresh(self):
        """Advance the cooldown by the time elapsed since the last rerun."""
        if self.timer is not None:
            self.timer.catch_up()

    def submit_code(self) -> Result:
        if not self.can_submit_code():
            return Result.failure(AuthError("Enter the code from your email", code="gate_closed"))
        self.stage = ResetStage.AWAITING_VERIFICATION
        result = self.backend.verify_reset_code(self.email, self.verification_code)
        if result.ok:
            self.verified = True
        else:
            self.stage = ResetStage.CODE_SENT
        return result

    def close(self):
        """Release the timer when the owning screen goes away."""
        if self.timer is not None:
            self.timer.cancel()

"""PID controller with anti-windup and per-component output limits."""

from __future__ import annotations

from dataclasses import dataclass


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if value > high:
        return high
    return value


@dataclass(frozen=True)
class PidGains:
    """Proportional, integral and derivative gains."""

    kp: float
    ki: float
    kd: float


@dataclass(frozen=True)
class PidLimits:
    """Limits on the total output and on each term."""

    max_ret: float
    min_ret: float
    max_ret_p: float
    min_ret_p: float
    max_ret_i: float
    min_ret_i: float
    max_ret_d: float
    min_ret_d: float


@dataclass(frozen=True)
class PidContributions:
    """Breakdown of one PID output into its terms."""

    p: float = 0.0
    i: float = 0.0
    d: float = 0.0


class PidController:
    """PID controller with integral clamping against windup."""

    def __init__(self, gains: PidGains, limits: PidLimits) -> None:
        self.gains = gains
        self.limits = limits
        self._error_integral = 0.0
        self._prev_error = 0.0
        self._is_first_time = True

    def reset(self) -> None:
        """Clear the integral and derivative history."""
        self._error_integral = 0.0
        self._prev_error = 0.0
        self._is_first_time = True

    def calculate(
        self, error: float, dt: float, enable_integration: bool
    ) -> tuple[float, PidContributions]:
        """Return the clamped output and its contributions for one step.

        A non-positive ``dt`` yields a zero output and leaves state untouched.
        """
        if dt <= 0.0:
            return 0.0, PidContributions()

        g = self.gains
        lim = self.limits

        ret_p = _clamp(g.kp * error, lim.min_ret_p, lim.max_ret_p)

        if enable_integration and abs(g.ki) > 1e-10:
            self._error_integral += error * dt
            self._error_integral = _clamp(
                self._error_integral, lim.min_ret_i / g.ki, lim.max_ret_i / g.ki
            )
        ret_i = _clamp(g.ki * self._error_integral, lim.min_ret_i, lim.max_ret_i)

        if self._is_first_time:
            self._is_first_time = False
            ret_d = 0.0
        else:
            ret_d = _clamp(
                g.kd * (error - self._prev_error) / dt, lim.min_ret_d, lim.max_ret_d
            )

        self._prev_error = error

        output = _clamp(ret_p + ret_i + ret_d, lim.min_ret, lim.max_ret)
        return output, PidContributions(p=ret_p, i=ret_i, d=ret_d)
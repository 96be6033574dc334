"""States, parameters and per-cycle data of the longitudinal controller."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from safety_island.messages import Point
from safety_island.pid import PidGains, PidLimits
from safety_island.smooth_stop import SmoothStopParams


class ControlState(Enum):
    """States of the longitudinal control state machine."""

    DRIVE = "drive"
    STOPPING = "stopping"
    STOPPED = "stopped"
    EMERGENCY = "emergency"


class Shift(Enum):
    """Direction of travel."""

    FORWARD = "forward"
    REVERSE = "reverse"


class SlopeSource(Enum):
    """Where the slope used for compensation comes from."""

    RAW_PITCH = "raw_pitch"
    TRAJECTORY_PITCH = "trajectory_pitch"
    TRAJECTORY_ADAPTIVE = "trajectory_adaptive"


@dataclass(frozen=True)
class StateTransitionParams:
    """Thresholds for state machine transitions."""

    drive_state_stop_dist: float = 0.5
    drive_state_offset_stop_dist: float = 1.0
    stopping_state_stop_dist: float = 0.5
    stopped_state_entry_duration_time: float = 0.1
    stopped_state_entry_vel: float = 0.01
    stopped_state_entry_acc: float = 0.1
    emergency_state_overshoot_stop_dist: float = 1.5
    emergency_state_traj_trans_dev: float = 3.0
    emergency_state_traj_rot_dev: float = 0.7854


def _default_gains() -> PidGains:
    return PidGains(kp=1.0, ki=0.1, kd=0.0)


def _default_limits() -> PidLimits:
    return PidLimits(
        max_ret=1.0,
        min_ret=-1.0,
        max_ret_p=1.0,
        min_ret_p=-1.0,
        max_ret_i=0.3,
        min_ret_i=-0.3,
        max_ret_d=0.0,
        min_ret_d=0.0,
    )


@dataclass
class ControllerParams:
    """All parameters of the longitudinal controller."""

    state_transition: StateTransitionParams = field(
        default_factory=StateTransitionParams
    )

    pid_gains: PidGains = field(default_factory=_default_gains)
    pid_limits: PidLimits = field(default_factory=_default_limits)

    lpf_vel_error_gain: float = 0.9
    lpf_pitch_gain: float = 0.95

    enable_integration_at_low_speed: bool = False
    current_vel_threshold_pid_integrate: float = 0.5
    time_threshold_before_pid_integrate: float = 2.0

    enable_brake_keeping_before_stop: bool = False
    brake_keeping_acc: float = -0.2

    enable_smooth_stop: bool = True
    smooth_stop_params: SmoothStopParams = field(default_factory=SmoothStopParams)

    stopped_vel: float = 0.0
    stopped_acc: float = -3.4
    emergency_vel: float = 0.0
    emergency_acc: float = -5.0
    emergency_jerk: float = -3.0

    max_acc: float = 3.0
    min_acc: float = -5.0
    max_jerk: float = 2.0
    min_jerk: float = -5.0

    enable_slope_compensation: bool = True
    slope_source: SlopeSource = SlopeSource.RAW_PITCH
    adaptive_trajectory_velocity_th: float = 1.0
    max_pitch_rad: float = 0.1
    min_pitch_rad: float = -0.1

    delay_compensation_time: float = 0.17

    enable_overshoot_emergency: bool = True
    enable_large_tracking_error_emergency: bool = True

    enable_keep_stopped_until_steer_convergence: bool = True


@dataclass
class ControlData:
    """Inputs for one control cycle, computed by the caller."""

    dt: float
    current_vel: float
    current_acc: float
    target_vel: float
    target_acc: float
    nearest_idx: int = 0
    stop_dist: float = 0.0
    shift: Shift = Shift.FORWARD
    slope_pitch: float = 0.0
    nearest_point: Point = field(default_factory=Point)
    nearest_yaw: float = 0.0


@dataclass(frozen=True)
class LongitudinalOutput:
    """Velocity and acceleration commanded by the controller."""

    velocity: float = 0.0
    acceleration: float = 0.0
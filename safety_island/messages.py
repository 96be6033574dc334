"""Message types exchanged between the safety island components."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Point:
    """A position in 3D space (metres)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Longitudinal:
    """Longitudinal part of a control command."""

    velocity: float = 0.0
    acceleration: float = 0.0
    jerk: float = 0.0
    is_defined_acceleration: bool = False
    is_defined_jerk: bool = False


@dataclass
class Control:
    """Vehicle control command."""

    longitudinal: Longitudinal = field(default_factory=Longitudinal)


@dataclass
class MrmBehaviorStatus:
    """Status reported by an MRM behavior operator."""

    NOT_AVAILABLE = 0
    AVAILABLE = 1
    OPERATING = 2

    state: int = 0


@dataclass
class MrmState:
    """State of the minimum-risk-maneuver handler."""

    UNKNOWN = 0
    NORMAL = 1
    MRM_OPERATING = 2
    MRM_SUCCEEDED = 3
    MRM_FAILED = 4

    BEHAVIOR_UNKNOWN = 0
    BEHAVIOR_NONE = 1
    BEHAVIOR_EMERGENCY_STOP = 2
    BEHAVIOR_COMFORTABLE_STOP = 3

    state: int = 0
    behavior: int = 0


@dataclass
class HazardLightsCommand:
    """Hazard lights command."""

    NO_COMMAND = 0
    DISABLE = 1
    ENABLE = 2

    command: int = 0


@dataclass
class GearCommand:
    """Gear command."""

    NONE = 0
    PARK = 22

    command: int = 0


@dataclass
class OperationModeAvailability:
    """Which operation modes the system can currently provide."""

    stop: bool = False
    autonomous: bool = False
    local: bool = False
    remote: bool = False
    emergency_stop: bool = False
    comfortable_stop: bool = False
    pull_over: bool = False
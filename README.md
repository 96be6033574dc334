# safety_island

Building blocks for longitudinal vehicle control on a safety island. A safety island is a controller that must bring the vehicle to a safe stop by itself. The package is pure Python and has no runtime dependencies.

## Modules

- `safety_island.pid`: `PidController`, a PID controller.
  - It clamps each term separately and clamps the total output, using the limits in `PidLimits`. The gains come from `PidGains`.
  - The integral is clamped so that it cannot wind up.
  - The derivative term is zero on the first call after construction or `reset()`.
  - `calculate(error, dt, enable_integration)` returns `(output, PidContributions)`. If `dt <= 0` it returns `0.0` and changes no state.
- `safety_island.smooth_stop`: `SmoothStop`, with parameters in `SmoothStopParams`. It computes deceleration commands for the approach to a stop point.
  - `start(pred_vel, pred_stop_dist)` sets the kinematic strong deceleration `-v²/(2d)`, clamped to `[min_strong_acc, max_strong_acc]`.
  - `add_vel_sample(time, vel)` keeps the last 64 samples.
  - `time_to_stop()` estimates the remaining time to standstill by linear regression. It returns `None` when that cannot be done.
  - `calculate(stop_dist, current_vel, current_acc, current_time)` handles strong and weak overshoot and a running vehicle. Once the vehicle has stopped, it holds the brake for 0.5 s.
- `safety_island.lowpass_filter`: `LowpassFilter1d`, a first-order filter `y = gain * y_prev + (1 - gain) * x`. It has `filter(value)` and `reset(value)`.
- `safety_island.rate_limit`:
  - `apply_diff_limit(value, prev, dt, max_rate, min_rate)` limits the change from `prev` to `[min_rate*dt, max_rate*dt]`. Use it, for example, to limit jerk on an acceleration command.
  - `apply_diff_limit_symmetric(value, prev, dt, limit)` is the same with the range `[-limit*dt, limit*dt]`.
- `safety_island.trajectory_pitch`: `get_pitch_by_traj(points, start_idx, wheel_base)`. It gives the elevation angle from `points[start_idx]` to the point about `wheel_base` metres ahead, measured along the trajectory in 2D. It returns `0.0` for degenerate input.
- `safety_island.longitudinal_params`: controller states and parameter types.
  - Enums: `ControlState`, `Shift`, `SlopeSource`.
  - Parameters with defaults: `StateTransitionParams`, `ControllerParams`.
  - Per-cycle data: `ControlData`, `LongitudinalOutput`.
- `safety_island.messages`: message dataclasses with their state constants:
  - `Point`
  - `Longitudinal`, `Control`
  - `MrmBehaviorStatus`, `MrmState`
  - `HazardLightsCommand`, `GearCommand`
  - `OperationModeAvailability`

## Installation

```
pip install .
```

## Example

```python
from safety_island.lowpass_filter import LowpassFilter1d
from safety_island.messages import Point
from safety_island.pid import PidController, PidGains, PidLimits
from safety_island.rate_limit import apply_diff_limit
from safety_island.smooth_stop import SmoothStop
from safety_island.trajectory_pitch import get_pitch_by_traj

pid = PidController(
    PidGains(kp=1.0, ki=0.1, kd=0.0),
    PidLimits(max_ret=1.0, min_ret=-1.0, max_ret_p=1.0, min_ret_p=-1.0,
              max_ret_i=0.3, min_ret_i=-0.3, max_ret_d=0.0, min_ret_d=0.0),
)
lpf = LowpassFilter1d(value=0.0, gain=0.9)

dt = 1.0 / 30.0
error = lpf.filter(5.0 - 3.0)           # target minus current velocity
acc, parts = pid.calculate(error, dt, enable_integration=True)
acc = apply_diff_limit(acc, prev=0.0, dt=dt, max_rate=2.0, min_rate=-5.0)

stop = SmoothStop()
stop.start(pred_vel=2.0, pred_stop_dist=10.0)
stop.add_vel_sample(0.0, 2.0)
brake = stop.calculate(stop_dist=3.0, current_vel=1.0, current_acc=-0.2, current_time=0.0)

slope = [Point(x=float(i), z=0.1 * i) for i in range(5)]
pitch = get_pitch_by_traj(slope, start_idx=0, wheel_base=2.0)
```

## What the package does not do

The package holds the building blocks and the parameter types only. It does not contain:

- a longitudinal controller that runs the DRIVE / STOPPING / STOPPED / EMERGENCY state machine,
- a minimal-risk-maneuver handler,
- emergency or comfortable stop operators,
- an operation mode transition manager.

It has no command-line program and no messaging transport. Callers wire the components together and call them at their own control rate.

## Running the tests

```
pip install .[test]
pytest
```
import pytest

from safety_island.pid import PidController, PidGains, PidLimits


def default_gains():
    return PidGains(kp=1.0, ki=0.1, kd=0.0)


def default_limits():
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


def test_proportional_only():
    pid = PidController(PidGains(kp=2.0, ki=0.0, kd=0.0), default_limits())
    out, contrib = pid.calculate(0.3, 0.01, False)
    assert out == pytest.approx(0.6, abs=1e-10)
    assert contrib.p == pytest.approx(0.6, abs=1e-10)
    assert contrib.i == pytest.approx(0.0, abs=1e-10)


def test_integral_accumulates():
    pid = PidController(default_gains(), default_limits())
    for _ in range(10):
        pid.calculate(1.0, 0.1, True)
    _, contrib = pid.calculate(1.0, 0.1, True)
    assert contrib.i > 0.1


def test_integral_windup_clamped():
    pid = PidController(default_gains(), default_limits())
    for _ in range(1000):
        pid.calculate(100.0, 0.1, True)
    _, contrib = pid.calculate(100.0, 0.1, True)
    assert contrib.i == pytest.approx(0.3, abs=1e-10)


def test_output_clamped():
    pid = PidController(default_gains(), default_limits())
    out, _ = pid.calculate(100.0, 0.1, False)
    assert out == pytest.approx(1.0, abs=1e-10)


def test_reset_clears_state():
    pid = PidController(default_gains(), default_limits())
    pid.calculate(1.0, 0.1, True)
    pid.calculate(1.0, 0.1, True)
    pid.reset()
    out, contrib = pid.calculate(0.0, 0.1, True)
    assert out == pytest.approx(0.0, abs=1e-10)
    assert contrib.i == pytest.approx(0.0, abs=1e-10)


def test_zero_dt_returns_zero():
    pid = PidController(default_gains(), default_limits())
    out, _ = pid.calculate(1.0, 0.0, True)
    assert out == pytest.approx(0.0, abs=1e-10)


def test_derivative_term():
    gains = PidGains(kp=0.0, ki=0.0, kd=1.0)
    limits = PidLimits(
        max_ret=100.0,
        min_ret=-100.0,
        max_ret_p=0.0,
        min_ret_p=0.0,
        max_ret_i=0.0,
        min_ret_i=0.0,
        max_ret_d=100.0,
        min_ret_d=-100.0,
    )
    pid = PidController(gains, limits)
    out1, _ = pid.calculate(0.0, 0.1, False)
    assert out1 == pytest.approx(0.0, abs=1e-10)
    out2, contrib = pid.calculate(1.0, 0.1, False)
    assert out2 == pytest.approx(10.0, abs=1e-10)
    assert contrib.d == pytest.approx(10.0, abs=1e-10)


def test_integration_disabled():
    pid = PidController(default_gains(), default_limits())
    for _ in range(100):
        pid.calculate(1.0, 0.1, False)
    _, contrib = pid.calculate(1.0, 0.1, False)
    assert contrib.i == pytest.approx(0.0, abs=1e-10)


@pytest.mark.parametrize("error", [-1e6, -5.0, -0.2, 0.0, 0.7, 3.0, 1e6])
@pytest.mark.parametrize("dt", [0.001, 0.033, 0.5])
def test_output_and_integral_bounded(error, dt):
    limits = default_limits()
    pid = PidController(default_gains(), limits)
    for _ in range(10):
        out, contrib = pid.calculate(error, dt, True)
        assert limits.min_ret <= out <= limits.max_ret
        assert limits.min_ret_i <= contrib.i <= limits.max_ret_i


def test_negative_dt_returns_zero():
    pid = PidController(default_gains(), default_limits())
    out, contrib = pid.calculate(5.0, -0.1, True)
    assert out == 0.0
    assert (contrib.p, contrib.i, contrib.d) == (0.0, 0.0, 0.0)


def test_gain_update_takes_effect():
    pid = PidController(default_gains(), default_limits())
    pid.gains = PidGains(kp=0.5, ki=0.0, kd=0.0)
    out, _ = pid.calculate(1.0, 0.1, False)
    assert out == pytest.approx(0.5)
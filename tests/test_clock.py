import json

import pytest
from ball_sim.clock import Clock, WAIT_STEP
from ball_sim.config import SimConfig, load_config


class FakeTime:
    """Deterministic time source; sleeping advances the clock."""

    def __init__(self, start: float = 0.0):
        self.now = start
        self.sleeps: list[float] = []

    def timer(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


def test_uncapped_returns_elapsed():
    t = FakeTime()
    clock = Clock(None, timer=t.timer, sleeper=t.sleep)

    t.now = 0.25
    assert clock.tick() == pytest.approx(0.25)
    t.now = 0.375
    assert clock.tick() == pytest.approx(0.125)
    assert t.sleeps == []


def test_capped_waits_for_period():
    t = FakeTime()
    clock = Clock(0.01, timer=t.timer, sleeper=t.sleep)

    dt = clock.tick()
    assert dt >= 0.01
    assert dt < 0.01 + 2 * WAIT_STEP
    # Yields (sleep(0)) between the short sleeps
    assert 0 in t.sleeps
    assert WAIT_STEP in t.sleeps


def test_capped_returns_actual_not_nominal():
    t = FakeTime()
    clock = Clock(0.01, timer=t.timer, sleeper=t.sleep)

    t.now = 0.05
    assert clock.tick() == pytest.approx(0.05)
    assert t.sleeps == [], "No waiting when the frame already took longer"


def test_from_fps():
    assert Clock.from_fps(120).frame_cap == pytest.approx(1 / 120)
    assert Clock.from_fps(0).frame_cap is None
    assert Clock.from_fps(-1).frame_cap is None


def test_negative_cap_rejected():
    with pytest.raises(ValueError):
        Clock(-0.5)


def test_real_cap_accuracy():
    """100 capped ticks each last at least the period."""
    period = 0.002
    clock = Clock(period)

    ticks = [clock.tick() for _ in range(100)]

    assert all(dt >= period for dt in ticks)
    assert sum(ticks) >= 100 * period


def test_from_config_uses_loaded_frame_cap(tmp_path):
    path = tmp_path / "sim.json"
    path.write_text(json.dumps({"frame_cap": 0.02}))
    fake = FakeTime()

    clock = Clock.from_config(load_config(str(path)), timer=fake.timer, sleeper=fake.sleep)

    assert clock.frame_cap == 0.02
    assert clock.tick() >= 0.02


def test_from_config_uncapped():
    clock = Clock.from_config(SimConfig(frame_cap=None))
    assert clock.frame_cap is None

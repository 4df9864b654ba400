from dualscreen.timer import PeriodicTimer, Timer, monotonic_millis


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


def test_monotonic_millis_non_decreasing_and_32_bit():
    a = monotonic_millis()
    b = monotonic_millis()
    assert 0 <= a <= 0xFFFFFFFF
    assert 0 <= b <= 0xFFFFFFFF
    assert b >= a or a - b > 0x80000000


def test_timer_not_running_initially():
    timer = Timer(FakeClock())
    assert timer.is_running() is False
    assert timer.elapsed() == 0


def test_timer_measures_while_running():
    clock = FakeClock(1000)
    timer = Timer(clock)
    timer.start()
    clock.now = 1250
    assert timer.is_running() is True
    assert timer.elapsed() == 250


def test_timer_stop_freezes_elapsed():
    clock = FakeClock(0)
    timer = Timer(clock)
    timer.start()
    clock.now = 300
    timer.stop()
    clock.now = 900
    assert timer.is_running() is False
    assert timer.elapsed() == 300


def test_start_twice_keeps_original_start():
    clock = FakeClock(0)
    timer = Timer(clock)
    timer.start()
    clock.now = 100
    timer.start()
    clock.now = 400
    assert timer.elapsed() == 400


def test_reset_restarts_measurement():
    clock = FakeClock(0)
    timer = Timer(clock)
    timer.start()
    clock.now = 500
    timer.reset()
    clock.now = 520
    assert timer.is_running() is True
    assert timer.elapsed() == 20


def test_timer_handles_wraparound():
    clock = FakeClock(2**32 - 50)
    timer = Timer(clock)
    timer.start()
    clock.now = 50
    assert timer.elapsed() == 100


def test_periodic_timer_fires_once_per_period():
    clock = FakeClock(0)
    periodic = PeriodicTimer(100, clock)
    clock.now = 99
    assert periodic.check() is False
    clock.now = 100
    assert periodic.check() is True
    assert periodic.check() is False
    clock.now = 200
    assert periodic.check() is True


def test_periodic_timer_reset_and_period_change():
    clock = FakeClock(0)
    periodic = PeriodicTimer(100, clock)
    clock.now = 90
    periodic.reset()
    clock.now = 150
    assert periodic.check() is False
    periodic.period = 50
    assert periodic.check() is True
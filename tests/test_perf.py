import pytest

from consolecam.models import FrameSize, PerfSample
from consolecam.perf import PerfMonitor, format_status


class FakeClock:
    def __init__(self): self.t = 0.0
    def __call__(self): return self.t
    def advance(self, ms): self.t += ms / 1000.0


def test_stage_laps_and_interval():
    clock = FakeClock()
    perf = PerfMonitor(clock=clock)
    for stage, ms in (("image", 5), ("pixel_loop", 2), ("ascii_loop", 3), ("write", 10)):
        clock.advance(ms)
        assert perf.lap(stage) == pytest.approx(ms)
    sample = perf.finish_frame()
    assert sample.image_ms == pytest.approx(5)
    assert sample.write_ms == pytest.approx(10)
    assert sample.interval_ms == pytest.approx(20)
    assert sample.fps == pytest.approx(50.0)
    assert perf.last_sample is sample

    # second frame overwrites, no history
    clock.advance(40)
    perf.lap("image")
    second = perf.finish_frame()
    assert second.interval_ms == pytest.approx(40)
    assert second.pixel_loop_ms == 0.0
    assert perf.last_sample is second


def test_skip_frame_keeps_interval_running():
    clock = FakeClock()
    perf = PerfMonitor(clock=clock)
    clock.advance(100)
    perf.lap("image")
    perf.skip_frame()
    clock.advance(10)
    perf.lap("image")
    sample = perf.finish_frame()
    assert sample.image_ms == pytest.approx(10)
    # the skipped 100ms still counts toward the frame interval
    assert sample.interval_ms == pytest.approx(110)
    assert sample.fps == pytest.approx(1000 / 110)


def test_unknown_stage():
    with pytest.raises(ValueError):
        PerfMonitor().lap("decode")


def test_format_status():
    sample = PerfSample(image_ms=3, pixel_loop_ms=1, ascii_loop_ms=2, write_ms=4, interval_ms=40)
    text = format_status(sample, FrameSize(width=640, height=480), FrameSize(width=80, height=12))
    assert text == ("ConsoleCam - FPS: 25.00 - Input: 640x480 - Output: 80x12 - "
                    "Performance: Image: 3ms, PixelLoop: 1ms, AsciiLoop: 2ms, Write: 4ms")
    assert PerfSample().fps == 0.0

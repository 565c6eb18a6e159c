import scripts.cli as cli
from consolecam.errors import CaptureDeviceLost


def test_cli_builds_settings(monkeypatch, tmp_path):
    seen = {}
    def fake_run_loop(settings, stop_event=None, max_iterations=None):
        seen["settings"] = settings
        seen["max"] = max_iterations
    monkeypatch.setattr(cli, "run_loop", fake_run_loop)
    monkeypatch.chdir(tmp_path)
    rc = cli.main(["--camera", "3", "--scale", "8", "--workers", "2", "--max-frames", "5"])
    assert rc == 0
    s = seen["settings"]
    assert (s.CAMERA_INDEX, s.RAMP_SCALE, s.MAP_WORKERS) == (3, 8, 2)
    assert seen["max"] == 5


def test_cli_reports_lost_device(monkeypatch, capsys, tmp_path):
    monkeypatch.chdir(tmp_path)
    def boom(*a, **k):
        raise CaptureDeviceLost("Could not open camera index 9")
    monkeypatch.setattr(cli, "run_loop", boom)
    assert cli.main(["--camera", "9"]) == 1
    assert "Could not open camera index 9" in capsys.readouterr().err


def test_cli_ctrl_c_is_clean(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    def interrupted(*a, **k):
        raise KeyboardInterrupt
    monkeypatch.setattr(cli, "run_loop", interrupted)
    assert cli.main([]) == 0


def test_cli_sigint_sets_stop_event(monkeypatch, tmp_path):
    import signal
    monkeypatch.chdir(tmp_path)
    seen = {"iterations": 0}
    def polling_loop(settings, stop_event=None, max_iterations=None):
        while not stop_event.is_set():
            seen["iterations"] += 1
            if seen["iterations"] == 3:
                signal.raise_signal(signal.SIGINT)
            assert seen["iterations"] < 100
        seen["stopped_by_event"] = True
    monkeypatch.setattr(cli, "run_loop", polling_loop)
    before = signal.getsignal(signal.SIGINT)
    assert cli.main([]) == 0
    assert seen == {"iterations": 3, "stopped_by_event": True}
    assert signal.getsignal(signal.SIGINT) is before

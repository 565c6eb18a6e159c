from consolecam.config import Settings

def test_Settings():
    s = Settings()
    assert s.CELL_ASPECT > 0
    assert s.MAP_WORKERS >= 1
    s2 = Settings(RAMP_SCALE=32, CAMERA_INDEX=1)
    assert s2.RAMP_SCALE == 32
    assert s2.CAMERA_INDEX == 1

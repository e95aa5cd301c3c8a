import pytest

from shapescan.config import ShapescanConfig


def test_defaults(monkeypatch):
    for name in ("SHAPESCAN_THRESHOLD", "SHAPESCAN_MIN_BLOB_PIXELS", "SHAPESCAN_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    config = ShapescanConfig()
    assert config.threshold == 128
    assert config.min_blob_pixels == 80
    assert config.log_level == "WARNING"


def test_env_fallback(monkeypatch):
    monkeypatch.setenv("SHAPESCAN_MIN_BLOB_PIXELS", "20")
    monkeypatch.setenv("SHAPESCAN_LOG_LEVEL", "debug")
    config = ShapescanConfig()
    assert config.min_blob_pixels == 20
    assert config.log_level == "DEBUG"


def test_explicit_values_win(monkeypatch):
    monkeypatch.setenv("SHAPESCAN_THRESHOLD", "200")
    assert ShapescanConfig(threshold=100).threshold == 100


def test_bad_env_value(monkeypatch):
    monkeypatch.setenv("SHAPESCAN_THRESHOLD", "bright")
    with pytest.raises(ValueError):
        ShapescanConfig()

# tests/test_settings.py
import logging
import pytest

import settings
from settings import AnalysisConfig, load_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("FORENSIC_SPIKE_K", "FORENSIC_BUCKET_WIDTH", "FORENSIC_STRICT_INGEST"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(settings, "load_dotenv", lambda: None)


def test_defaults_when_file_missing(tmp_path):
    assert load_config(str(tmp_path / "absent.yaml")) == AnalysisConfig()


def test_yaml_values_are_applied(tmp_path):
    path = tmp_path / "analysis.yaml"
    path.write_text("spikes:\n  k: 3.5\n  bucket_width: 60\ningest:\n  strict: true\n")
    cfg = load_config(str(path))
    assert cfg == AnalysisConfig(spike_k=3.5, bucket_width=60, strict_ingest=True)


def test_environment_overrides_yaml(tmp_path, monkeypatch):
    path = tmp_path / "analysis.yaml"
    path.write_text("spikes:\n  k: 3.5\n")
    monkeypatch.setenv("FORENSIC_SPIKE_K", "1.5")
    monkeypatch.setenv("FORENSIC_BUCKET_WIDTH", "5")
    monkeypatch.setenv("FORENSIC_STRICT_INGEST", "yes")
    cfg = load_config(str(path))
    assert cfg.spike_k == 1.5
    assert cfg.bucket_width == 5
    assert cfg.strict_ingest is True


def test_invalid_values_fall_back_with_warning(tmp_path, monkeypatch, caplog):
    path = tmp_path / "analysis.yaml"
    path.write_text("spikes:\n  k: lots\n  bucket_width: -4\n")
    with caplog.at_level(logging.WARNING):
        cfg = load_config(str(path))
    assert cfg.spike_k == 2.0
    assert cfg.bucket_width == 1
    assert "spikes.k" in caplog.text


def test_broken_yaml_is_ignored(tmp_path, caplog):
    path = tmp_path / "analysis.yaml"
    path.write_text("spikes: [unclosed\n")
    with caplog.at_level(logging.WARNING):
        assert load_config(str(path)) == AnalysisConfig()
    assert "Failed to load YAML" in caplog.text

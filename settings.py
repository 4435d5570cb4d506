"""
settings.py - Configuration loader for spike detection and ingestion options
"""

import os
import logging
from dataclasses import dataclass, replace
from typing import Optional

import yaml
from dotenv import load_dotenv

from constants import (
    CONFIG_PATH, CONFIG_FILE, DEFAULT_SPIKE_K, DEFAULT_BUCKET_WIDTH,
    ENV_SPIKE_K, ENV_BUCKET_WIDTH, ENV_STRICT_INGEST,
)

logger = logging.getLogger(__name__)

_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class AnalysisConfig:
    spike_k: float = DEFAULT_SPIKE_K
    bucket_width: int = DEFAULT_BUCKET_WIDTH
    strict_ingest: bool = False


# === File Loaders ===

def load_yaml_file(path):
    """Helper to load a YAML file with robust error handling."""
    if not os.path.exists(path):
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except (yaml.YAMLError, IOError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to load YAML file {path}: {e}")
        return None


def _coerce(value, cast, name, default):
    try:
        return cast(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring invalid value for {name}: {value!r}")
        return default


def _as_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUTHY


# === Config Assembly ===

def _apply_mapping(cfg: AnalysisConfig, data: dict) -> AnalysisConfig:
    spikes = data.get("spikes") or {}
    ingest = data.get("ingest") or {}
    if "k" in spikes:
        cfg = replace(cfg, spike_k=_coerce(spikes["k"], float, "spikes.k", cfg.spike_k))
    if "bucket_width" in spikes:
        cfg = replace(cfg, bucket_width=_coerce(
            spikes["bucket_width"], int, "spikes.bucket_width", cfg.bucket_width))
    if "strict" in ingest:
        cfg = replace(cfg, strict_ingest=_as_bool(ingest["strict"]))
    return cfg


def _apply_env(cfg: AnalysisConfig) -> AnalysisConfig:
    if os.getenv(ENV_SPIKE_K):
        cfg = replace(cfg, spike_k=_coerce(os.getenv(ENV_SPIKE_K), float, ENV_SPIKE_K, cfg.spike_k))
    if os.getenv(ENV_BUCKET_WIDTH):
        cfg = replace(cfg, bucket_width=_coerce(
            os.getenv(ENV_BUCKET_WIDTH), int, ENV_BUCKET_WIDTH, cfg.bucket_width))
    if os.getenv(ENV_STRICT_INGEST):
        cfg = replace(cfg, strict_ingest=_as_bool(os.getenv(ENV_STRICT_INGEST)))
    return cfg


def load_config(path: Optional[str] = None) -> AnalysisConfig:
    """Build the analysis config from defaults, config/analysis.yaml and the environment.

    Environment variables win over the YAML file, which wins over defaults.
    """
    load_dotenv()
    cfg = AnalysisConfig()
    data = load_yaml_file(path or os.path.join(CONFIG_PATH, CONFIG_FILE))
    if isinstance(data, dict):
        cfg = _apply_mapping(cfg, data)
    elif data is not None:
        logger.warning("Config file is not a mapping; using defaults")
    cfg = _apply_env(cfg)
    if cfg.bucket_width <= 0:
        logger.warning(f"bucket_width must be positive, got {cfg.bucket_width}; using default")
        cfg = replace(cfg, bucket_width=DEFAULT_BUCKET_WIDTH)
    return cfg

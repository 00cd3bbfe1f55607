from __future__ import annotations
import os, yaml
from dataclasses import dataclass, field
from typing import Optional

LEVEL_ENV = "JSON_TYPE_REPORT_LOG_LEVEL"
LOG_DIR_ENV = "JSON_TYPE_REPORT_LOG_DIR"


class ConfigError(ValueError):
    pass


@dataclass
class ReportCfg:
    # print the mapping dump instead of the table
    raw: bool = False
    # cells wider than this wrap onto extra lines
    max_column_width: int = 40


@dataclass
class LoggingCfg:
    level: str = "WARNING"
    format: str = "%(levelname)s %(name)s: %(message)s"
    # When set, diagnostics are also appended as NDJSON under this directory
    # (same shape as the input files, so they can be fed back to the tool).
    ndjson_dir: Optional[str] = None
    file_prefix: str = "diagnostics"


@dataclass
class AppCfg:
    report: ReportCfg = field(default_factory=ReportCfg)
    logging: LoggingCfg = field(default_factory=LoggingCfg)


def _as_int(d, key, default):
    v = d.get(key, default)
    try:
        return int(v)
    except Exception:
        return default


def _as_bool(d, key, default):
    v = d.get(key, default)
    if isinstance(v, str):
        return v.strip().lower() in ("1", "true", "yes", "on")
    return bool(v)


def _section(raw, name):
    sec = raw.get(name) or {}
    if not isinstance(sec, dict):
        raise ConfigError(f"config section {name!r} must be a mapping")
    return dict(sec)


def load_config(path: Optional[str] = None) -> AppCfg:
    """Load YAML config from `path` (defaults only when None), then apply env overrides."""
    raw = {}
    if path is not None:
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"cannot load config {path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError(f"config {path} must be a mapping")

    rep_raw = _section(raw, "report")
    report = ReportCfg(
        raw=_as_bool(rep_raw, "raw", ReportCfg.raw),
        max_column_width=max(1, _as_int(rep_raw, "max_column_width", ReportCfg.max_column_width)),
    )

    log_raw = _section(raw, "logging")
    try:
        log = LoggingCfg(**log_raw)
    except TypeError as e:
        raise ConfigError(f"bad logging section: {e}") from e
    log.level = str(os.getenv(LEVEL_ENV) or log.level).upper()
    log.ndjson_dir = os.getenv(LOG_DIR_ENV) or log.ndjson_dir
    return AppCfg(report=report, logging=log)

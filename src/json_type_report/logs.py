from __future__ import annotations
import os, json, time, pathlib, uuid, logging
from typing import Optional, IO

from .config import LoggingCfg

LOGGER_NAME = "json_type_report"


class NdjsonDiagnosticHandler(logging.Handler):
    """Append each diagnostic as one JSON object per line.

    Records look like {"type": "error", "msg": ..., "data": {"line": 3}, ...},
    so a diagnostics file is itself valid input for the report.
    """
    def __init__(self, directory: str, file_prefix: str, level: int = logging.NOTSET):
        super().__init__(level)
        self.dir = pathlib.Path(directory)
        self.dir.mkdir(parents=True, exist_ok=True)
        self.prefix = file_prefix
        self.seq = 0
        self.session_id: str = os.getenv("SESSION_ID") or uuid.uuid4().hex[:12]
        self.pid: int = os.getpid()
        stamp = time.strftime("%Y%m%d_%H%M%S", time.localtime())
        self.path = self.dir / f"{self.prefix}_{stamp}.ndjson"
        self._fh: Optional[IO[str]] = open(self.path, "a", buffering=1, encoding="utf-8")

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.seq += 1
            lt = time.localtime(record.created)
            msec = int((record.created % 1.0) * 1000)
            obj = {
                "type": record.levelname.lower(),
                "msg": record.getMessage(),
                "data": {},
                "hms": time.strftime("%H:%M:%S", lt) + f".{msec:03d}",
                "seq": self.seq,
                "session_id": self.session_id,
                "pid": self.pid,
            }
            line = getattr(record, "line", None)
            if line is not None:
                obj["data"]["line"] = line
            if self._fh:
                self._fh.write(json.dumps(obj) + "\n")
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        if self._fh:
            self._fh.close()
            self._fh = None
        super().close()


def setup_logging(cfg: Optional[LoggingCfg] = None, stream: Optional[IO[str]] = None) -> logging.Logger:
    """Configure and return the package logger. Safe to call more than once."""
    cfg = cfg or LoggingCfg()
    logger = logging.getLogger(LOGGER_NAME)
    level = logging.getLevelName(cfg.level.upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level {cfg.level!r}")
    logger.setLevel(level)
    logger.propagate = False

    # replace handlers from a previous call
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    sh = logging.StreamHandler(stream)
    sh.setFormatter(logging.Formatter(cfg.format))
    logger.addHandler(sh)
    if cfg.ndjson_dir:
        logger.addHandler(NdjsonDiagnosticHandler(cfg.ndjson_dir, cfg.file_prefix))
    return logger

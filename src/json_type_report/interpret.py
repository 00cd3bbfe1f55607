from __future__ import annotations
import json, logging, math
from typing import Any, Dict, Optional

from .analysis import Analysis
from .reader import PathLike, iter_lines, line_byte_size
from .report import render_debug, render_table


def _reject_constant(name: str):
    # NaN / Infinity are not JSON
    raise ValueError(f"invalid JSON literal {name}")


def _finite_float(s: str) -> float:
    # 1e400 and friends overflow to inf
    v = float(s)
    if math.isinf(v):
        raise ValueError(f"number out of range: {s}")
    return v


def type_key(value: Any) -> str:
    """Compact JSON text of a `type` value, object keys sorted."""
    return json.dumps(value, separators=(",", ":"), sort_keys=True, ensure_ascii=False, allow_nan=False)


def interpret_object(analysis: Analysis, obj: Dict[str, Any], num: int, byte_size: int, log: logging.Logger) -> bool:
    if "type" not in obj:
        log.error("missing type info for json entry on line %d", num, extra={"line": num})
        return False
    try:
        key = type_key(obj["type"])
    except (TypeError, ValueError):
        log.error("invalid type info for json entry on line %d", num, extra={"line": num})
        return False
    analysis.record(key, byte_size)
    return True


def interpret_line(analysis: Analysis, text: str, num: int, byte_size: int, log: logging.Logger) -> bool:
    """Feed one input line into `analysis`.

    Returns True when the line was counted. Every failure here is logged
    against the line number and swallowed so the run can go on.
    """
    if not text:
        log.warning("empty entry on line %d", num, extra={"line": num})
        return False
    try:
        obj = json.loads(text, parse_constant=_reject_constant, parse_float=_finite_float)
        # lone surrogate escapes decode fine but cannot be written back out
        json.dumps(obj, ensure_ascii=False).encode("utf-8")
    except (ValueError, RecursionError):
        # JSONDecodeError and UnicodeEncodeError are ValueErrors
        obj = None
    if not isinstance(obj, dict):
        log.error("unexpected json entry format on line %d", num, extra={"line": num})
        return False
    return interpret_object(analysis, obj, num, byte_size, log)


def get_analysis(path: PathLike, log: logging.Logger) -> Analysis:
    """Build an Analysis from every line of `path`. OSError propagates."""
    analysis = Analysis()
    for num, text in iter_lines(path):
        interpret_line(analysis, text, num, line_byte_size(text), log)
    log.debug("analysed %s: %d objects across %d types", path, analysis.total_objects(), len(analysis))
    return analysis


def analyse_file(path: PathLike, log: logging.Logger, *, raw: bool = False, max_column_width: int = 40) -> Optional[str]:
    try:
        analysis = get_analysis(path, log)
    except OSError as e:
        log.error("%s", e)
        return None
    if raw:
        return render_debug(analysis)
    return render_table(analysis, max_column_width=max_column_width)

from __future__ import annotations
import logging
import os

_TRUTHY = {"1", "true", "yes", "on"}

# Defaults
_DEFAULT_DIALECT = "numeric"


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def get_default_dialect() -> str:
    raw = os.environ.get('TINYLISP_DIALECT')
    if not raw or not raw.strip():
        return _DEFAULT_DIALECT
    return raw.strip().lower()


def trace_enabled() -> bool:
    return flag_from_env('TINYLISP_TRACE')


def apply_trace(logger: logging.Logger) -> None:
    """Switch `logger` to DEBUG when TINYLISP_TRACE is set.

    Called once, when the evaluator module is imported; logger levels are
    process-wide.
    """
    if trace_enabled():
        logger.setLevel(logging.DEBUG)

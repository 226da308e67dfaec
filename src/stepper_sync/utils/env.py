from __future__ import annotations

import os
from typing import Mapping, Optional


def _source(env: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if env is None else env


def env_str(name: str, default: Optional[str] = None, env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    v = _source(env).get(name)
    if v is None:
        return default
    v = v.strip()
    return v if v != "" else default


def env_bool(name: str, default: bool = False, env: Optional[Mapping[str, str]] = None) -> bool:
    v = _source(env).get(name)
    if v is None:
        return default
    s = v.strip().lower()
    if s in ("1", "true", "yes", "on"):
        return True
    if s in ("0", "false", "no", "off"):
        return False
    return default


def env_float(name: str, default: float, env: Optional[Mapping[str, str]] = None) -> float:
    v = _source(env).get(name)
    if not v:
        return default
    try:
        return float(v)
    except Exception:
        return default


def env_optional_float(name: str, env: Optional[Mapping[str, str]] = None) -> Optional[float]:
    raw = env_str(name, None, env)
    if raw is None:
        return None
    try:
        return float(raw)
    except Exception:
        return None

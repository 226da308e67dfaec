"""Typed configuration for the stepper value-synchronisation coordinator.

All scalars are resolved once into immutable dataclasses. Durations are held
in seconds; the environment surface speaks milliseconds because that is what
people type when tuning tap cadences by hand.

Environment variables (all optional):

- ``STEPPER_SYNC_MIN`` / ``STEPPER_SYNC_MAX`` / ``STEPPER_SYNC_STEP``
- ``STEPPER_SYNC_THROTTLE_MS`` (default 80)
- ``STEPPER_SYNC_DEBOUNCE_MS`` (unset or <= 0 disables debounce)
- ``STEPPER_SYNC_OPTIMISTIC`` / ``STEPPER_SYNC_REVERT_ON_ERROR``
- ``STEPPER_SYNC_LONG_PRESS`` / ``STEPPER_SYNC_LONG_PRESS_ASYNC``
- ``STEPPER_SYNC_LONG_PRESS_DELAY_MS`` / ``STEPPER_SYNC_LONG_PRESS_INTERVAL_MS``
- ``STEPPER_SYNC_LOADING_SHOW_DELAY_MS`` / ``STEPPER_SYNC_LOADING_MIN_MS``
- ``STEPPER_SYNC_TIMEOUT_MS``
- ``STEPPER_SYNC_CONFIG``: JSON object whose keys are ``StepperConfig`` field
  names; applied after the individual variables.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Mapping, Optional

from stepper_sync.utils.env import env_bool, env_float, env_optional_float, env_str


logger = logging.getLogger(__name__)


# ---- Helpers -----------------------------------------------------------------

def _cfg_bool(value: object, default: bool) -> bool:
    if value is None:
        return bool(default)
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        val = value.strip().lower()
        if val in {"1", "true", "yes", "on"}:
            return True
        if val in {"0", "false", "no", "off", ""}:
            return False
    return bool(default)


def _cfg_number(value: object, default: float | int) -> float | int:
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        stripped = value.strip()
        try:
            return int(stripped)
        except ValueError:
            pass
        try:
            return float(stripped)
        except ValueError:
            return default
    return default


def _cfg_optional_float(value: object, default: Optional[float]) -> Optional[float]:
    if value is None:
        return default
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        stripped = value.strip()
        if stripped == "":
            return None
        try:
            return float(stripped)
        except ValueError:
            return default
    return default


def _ms(value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    return float(value) / 1000.0


def _load_json_config(env: Mapping[str, str], name: str) -> dict[str, object]:
    raw = env_str(name, None, env)
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except Exception:
        logger.warning("Failed to parse %s; ignoring", name, exc_info=True)
        return {}
    if isinstance(data, dict):
        return data
    logger.warning("%s must be a JSON object; ignoring", name)
    return {}


# ---- Types -------------------------------------------------------------------

@dataclass(frozen=True)
class LoadingConfig:
    """Loading indicator timing.

    ``show_delay_s`` hides the indicator entirely for operations that settle
    faster than the delay; ``minimum_duration_s`` keeps a shown indicator up
    for at least that long.
    """

    show_delay_s: float = 0.0
    minimum_duration_s: float = 0.3

    DEFAULT: ClassVar["LoadingConfig"]
    FAST: ClassVar["LoadingConfig"]
    SUBTLE: ClassVar["LoadingConfig"]

    def __post_init__(self) -> None:
        if self.show_delay_s < 0:
            raise ValueError("show_delay_s must be >= 0")
        if self.minimum_duration_s < 0:
            raise ValueError("minimum_duration_s must be >= 0")


LoadingConfig.DEFAULT = LoadingConfig()
LoadingConfig.FAST = LoadingConfig(minimum_duration_s=0.15)
LoadingConfig.SUBTLE = LoadingConfig(minimum_duration_s=0.2)


@dataclass(frozen=True)
class StepperConfig:
    """Resolved configuration for a single ``StepperCoordinator``."""

    min_value: float | int = 1
    max_value: float | int = 99
    step: float | int = 1
    throttle_interval_s: float = 0.08
    debounce_delay_s: Optional[float] = None
    optimistic_update: bool = False
    revert_on_error: bool = True
    allow_long_press_for_async: bool = False
    long_press_enabled: bool = True
    long_press_initial_delay_s: float = 0.4
    long_press_interval_s: float = 0.1
    delete_via_quantity_change: bool = False
    operation_timeout_s: Optional[float] = None
    loading: LoadingConfig = field(default_factory=LoadingConfig)

    def __post_init__(self) -> None:
        if self.max_value <= self.min_value:
            raise ValueError(
                f"max_value ({self.max_value}) must be greater than min_value ({self.min_value})"
            )
        if self.step <= 0:
            raise ValueError(f"step must be > 0 (got {self.step})")
        if self.throttle_interval_s < 0:
            raise ValueError("throttle_interval_s must be >= 0")
        if self.debounce_delay_s is not None and self.debounce_delay_s <= 0:
            raise ValueError("debounce_delay_s must be > 0 when set")
        if self.long_press_initial_delay_s < 0 or self.long_press_interval_s <= 0:
            raise ValueError("long press delays must be positive")
        if self.operation_timeout_s is not None and self.operation_timeout_s <= 0:
            raise ValueError("operation_timeout_s must be > 0 when set")

    # ------------------------------------------------------------------
    @property
    def debounce_enabled(self) -> bool:
        return self.debounce_delay_s is not None

    def replace(self, **changes: Any) -> "StepperConfig":
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object], *, base: Optional["StepperConfig"] = None) -> "StepperConfig":
        """Build a config from loosely typed values (JSON, CLI, settings files).

        Unknown keys are ignored with a warning; values that cannot be
        coerced fall back to ``base``.
        """

        base = base if base is not None else cls()
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(str(k) for k in data if k not in known)
        if unknown:
            logger.warning("Ignoring unknown stepper config keys: %s", ", ".join(unknown))

        loading_raw = data.get("loading")
        loading = base.loading
        if isinstance(loading_raw, Mapping):
            loading = LoadingConfig(
                show_delay_s=float(_cfg_number(loading_raw.get("show_delay_s"), loading.show_delay_s)),
                minimum_duration_s=float(
                    _cfg_number(loading_raw.get("minimum_duration_s"), loading.minimum_duration_s)
                ),
            )

        return cls(
            min_value=_cfg_number(data.get("min_value"), base.min_value),
            max_value=_cfg_number(data.get("max_value"), base.max_value),
            step=_cfg_number(data.get("step"), base.step),
            throttle_interval_s=float(_cfg_number(data.get("throttle_interval_s"), base.throttle_interval_s)),
            debounce_delay_s=_cfg_optional_float(data.get("debounce_delay_s"), base.debounce_delay_s),
            optimistic_update=_cfg_bool(data.get("optimistic_update"), base.optimistic_update),
            revert_on_error=_cfg_bool(data.get("revert_on_error"), base.revert_on_error),
            allow_long_press_for_async=_cfg_bool(
                data.get("allow_long_press_for_async"), base.allow_long_press_for_async
            ),
            long_press_enabled=_cfg_bool(data.get("long_press_enabled"), base.long_press_enabled),
            long_press_initial_delay_s=float(
                _cfg_number(data.get("long_press_initial_delay_s"), base.long_press_initial_delay_s)
            ),
            long_press_interval_s=float(
                _cfg_number(data.get("long_press_interval_s"), base.long_press_interval_s)
            ),
            delete_via_quantity_change=_cfg_bool(
                data.get("delete_via_quantity_change"), base.delete_via_quantity_change
            ),
            operation_timeout_s=_cfg_optional_float(data.get("operation_timeout_s"), base.operation_timeout_s),
            loading=loading,
        )


# ---- Loader ------------------------------------------------------------------

def load_stepper_config(env: Optional[Mapping[str, str]] = None, **overrides: Any) -> StepperConfig:
    """Resolve environment variables into a ``StepperConfig``.

    Keyword ``overrides`` win over everything read from the environment.
    """

    source: Mapping[str, str] = os.environ if env is None else env
    defaults = StepperConfig()

    debounce_ms = env_optional_float("STEPPER_SYNC_DEBOUNCE_MS", source)
    timeout_ms = env_optional_float("STEPPER_SYNC_TIMEOUT_MS", source)

    resolved: Dict[str, Any] = {
        "min_value": _cfg_number(env_str("STEPPER_SYNC_MIN", None, source), defaults.min_value),
        "max_value": _cfg_number(env_str("STEPPER_SYNC_MAX", None, source), defaults.max_value),
        "step": _cfg_number(env_str("STEPPER_SYNC_STEP", None, source), defaults.step),
        "throttle_interval_s": max(0.0, env_float("STEPPER_SYNC_THROTTLE_MS", 80.0, source)) / 1000.0,
        "debounce_delay_s": _ms(debounce_ms) if debounce_ms is not None and debounce_ms > 0 else None,
        "optimistic_update": env_bool("STEPPER_SYNC_OPTIMISTIC", defaults.optimistic_update, source),
        "revert_on_error": env_bool("STEPPER_SYNC_REVERT_ON_ERROR", defaults.revert_on_error, source),
        "long_press_enabled": env_bool("STEPPER_SYNC_LONG_PRESS", defaults.long_press_enabled, source),
        "allow_long_press_for_async": env_bool(
            "STEPPER_SYNC_LONG_PRESS_ASYNC", defaults.allow_long_press_for_async, source
        ),
        "long_press_initial_delay_s": max(0.0, env_float("STEPPER_SYNC_LONG_PRESS_DELAY_MS", 400.0, source))
        / 1000.0,
        "long_press_interval_s": max(1.0, env_float("STEPPER_SYNC_LONG_PRESS_INTERVAL_MS", 100.0, source))
        / 1000.0,
        "operation_timeout_s": _ms(timeout_ms) if timeout_ms is not None and timeout_ms > 0 else None,
        "loading": LoadingConfig(
            show_delay_s=max(0.0, env_float("STEPPER_SYNC_LOADING_SHOW_DELAY_MS", 0.0, source)) / 1000.0,
            minimum_duration_s=max(0.0, env_float("STEPPER_SYNC_LOADING_MIN_MS", 300.0, source)) / 1000.0,
        ),
    }

    try:
        config = StepperConfig(**resolved)
    except ValueError:
        logger.warning("Invalid stepper bounds in environment; using defaults", exc_info=True)
        resolved.update(min_value=defaults.min_value, max_value=defaults.max_value, step=defaults.step)
        config = StepperConfig(**resolved)

    json_overrides = _load_json_config(source, "STEPPER_SYNC_CONFIG")
    if json_overrides:
        config = StepperConfig.from_mapping(json_overrides, base=config)

    if overrides:
        config = config.replace(**overrides)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("stepper config resolved: %s", config)
    return config


__all__ = ["LoadingConfig", "StepperConfig", "load_stepper_config"]

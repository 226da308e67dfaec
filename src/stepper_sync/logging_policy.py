from __future__ import annotations

"""Logging toggles for the stepper coordinator stack.

Every env var that changes how chatty the coordinator is gets parsed here, so
the control modules depend on a structured policy rather than scattered
``os.getenv`` calls. Enabled toggles promote the matching events from DEBUG
to INFO.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from stepper_sync.utils.env import env_bool


@dataclass(frozen=True)
class SyncLoggingPolicy:
    """Coordinator logging flags."""

    log_operations: bool = False
    log_timing: bool = False
    log_long_press: bool = False

    @property
    def any_enabled(self) -> bool:
        return self.log_operations or self.log_timing or self.log_long_press


def load_logging_policy(env: Optional[Mapping[str, str]] = None) -> SyncLoggingPolicy:
    """Read logging flags from the provided environment mapping."""

    if env is None:
        env = os.environ

    # Master switch turns everything on; individual flags can still be set alone
    verbose = env_bool("STEPPER_SYNC_LOG_ALL", False, env)
    return SyncLoggingPolicy(
        log_operations=verbose or env_bool("STEPPER_SYNC_LOG_OPS", False, env),
        log_timing=verbose or env_bool("STEPPER_SYNC_LOG_TIMING", False, env),
        log_long_press=verbose or env_bool("STEPPER_SYNC_LOG_LONG_PRESS", False, env),
    )


__all__ = ["SyncLoggingPolicy", "load_logging_policy"]

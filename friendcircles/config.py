"""Runtime settings for circle ranking."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

ENV_CASE_SENSITIVE = "FRIENDCIRCLES_CASE_SENSITIVE"
ENV_REJECT_DUPLICATES = "FRIENDCIRCLES_REJECT_DUPLICATES"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass
class CirclesConfig:
    """Configuration shared by the graph, ranking and iterator layers."""
    case_sensitive_names: bool = False     # Plain code-point order when True
    reject_duplicate_names: bool = True    # Raise on repeated names

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CirclesConfig:
        """Build a config from FRIENDCIRCLES_* variables.

        Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        config = cls()

        raw = env.get(ENV_CASE_SENSITIVE)
        if raw is not None:
            config.case_sensitive_names = raw.strip().lower() in _TRUTHY

        raw = env.get(ENV_REJECT_DUPLICATES)
        if raw is not None:
            config.reject_duplicate_names = raw.strip().lower() in _TRUTHY

        return config

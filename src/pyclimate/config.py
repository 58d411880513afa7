"""Runtime configuration for pyclimate."""

from __future__ import annotations

import dataclasses
import os
from enum import StrEnum
from typing import Any

from pyclimate._constants import DEFAULT_STATE_CAPACITY
from pyclimate.exceptions import ClimateConfigError


class NumericPolicy(StrEnum):
    """How numeric fields that do not parse are treated."""

    PERMISSIVE = "permissive"
    STRICT = "strict"


class MissingFilePolicy(StrEnum):
    """What the file driver does when an input path cannot be opened."""

    SKIP = "skip"
    ABORT = "abort"


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class ClimateConfig:
    """Aggregation configuration.

    Parameters
    ----------
    state_capacity : int
        Maximum number of distinct state codes the aggregation table
        will track. Defaults to 50, one per US state.
    numeric_policy : NumericPolicy
        ``permissive`` parses numeric fields the way C ``atof``/``atol``
        do (longest numeric prefix, ``0`` when there is none).
        ``strict`` rejects the whole line instead.
    on_missing_file : MissingFilePolicy
        ``skip`` logs unreadable input files and carries on with the
        next one; ``abort`` stops the run with :class:`InputFileError`.
    encoding : str
        Text encoding used to decode input files.
    report_utc : bool
        Render report timestamps in UTC instead of local time.
    """

    state_capacity: int = DEFAULT_STATE_CAPACITY
    numeric_policy: NumericPolicy = NumericPolicy.PERMISSIVE
    on_missing_file: MissingFilePolicy = MissingFilePolicy.SKIP
    encoding: str = "utf-8"
    report_utc: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.state_capacity, bool) or not isinstance(self.state_capacity, int):
            raise ClimateConfigError(f"state_capacity must be an integer, got {self.state_capacity!r}")
        if self.state_capacity < 1:
            raise ClimateConfigError(f"state_capacity must be at least 1, got {self.state_capacity}")
        try:
            object.__setattr__(self, "numeric_policy", NumericPolicy(self.numeric_policy))
        except ValueError as exc:
            raise ClimateConfigError(f"unknown numeric policy {self.numeric_policy!r}") from exc
        try:
            object.__setattr__(self, "on_missing_file", MissingFilePolicy(self.on_missing_file))
        except ValueError as exc:
            raise ClimateConfigError(f"unknown missing-file policy {self.on_missing_file!r}") from exc

    @classmethod
    def from_env(cls, **overrides: Any) -> ClimateConfig:
        """Create configuration from environment variables.

        Reads the optional ``CLIMATE_*`` variables. Explicit keyword
        arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        ClimateConfig
            Populated configuration.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "CLIMATE_NUMERIC_POLICY": "numeric_policy",
            "CLIMATE_ON_MISSING_FILE": "on_missing_file",
            "CLIMATE_ENCODING": "encoding",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val.strip().lower() if field_name != "encoding" else val.strip()

        # state_capacity is numeric, handle separately
        capacity_env = env.get("CLIMATE_STATE_CAPACITY")
        if capacity_env is not None and "state_capacity" not in overrides:
            try:
                config_kwargs["state_capacity"] = int(capacity_env)
            except ValueError as exc:
                raise ClimateConfigError(f"CLIMATE_STATE_CAPACITY must be an integer, got {capacity_env!r}") from exc

        if "report_utc" not in overrides:
            config_kwargs["report_utc"] = _env_bool(env.get("CLIMATE_REPORT_UTC"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)

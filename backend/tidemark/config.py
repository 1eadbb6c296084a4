"""Runtime configuration for the Tidemark assessment engine.

Configuration is read once at startup and passed explicitly into the scorer,
projector and rules. Every value has a default, so ``ResilienceConfig()`` is a
working calibration for unit tests; ``load_config`` overlays environment
variables on top of those defaults.
"""

from __future__ import annotations

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from tidemark.exceptions import ConfigurationError
from tidemark.models.enums import ResilienceBand

DEFAULT_SIMULATION_YEARS: tuple[int, ...] = (
    2025, 2030, 2035, 2040, 2045, 2050, 2055,
)
DEFAULT_LLM_MODEL = "claude-sonnet-4-5-20250929"


@dataclass(frozen=True)
class ScoringWeights:
    """Share of the total score contributed by each factor. Must sum to 1.0."""

    elevation: float = 0.40
    foundation: float = 0.20
    materials: float = 0.15
    mitigation: float = 0.15
    utility_protection: float = 0.10

    def __post_init__(self) -> None:
        values = (
            self.elevation,
            self.foundation,
            self.materials,
            self.mitigation,
            self.utility_protection,
        )
        if not all(math.isfinite(v) for v in values):
            msg = "Scoring weights must be finite numbers"
            raise ConfigurationError(msg)
        if any(v < 0 for v in values):
            msg = "Scoring weights must be non-negative"
            raise ConfigurationError(msg)
        total = sum(values)
        if not math.isclose(total, 1.0, abs_tol=1e-6):
            msg = f"Scoring weights must sum to 1.0, got {total:.6f}"
            raise ConfigurationError(msg)


@dataclass(frozen=True)
class FloodParameters:
    """Baseline flood datum and the linear rise model used for projection."""

    current_bfe: float = 8.0
    annual_rise_rate: float = 0.1
    baseline_year: int = 2025
    simulation_years: tuple[int, ...] = DEFAULT_SIMULATION_YEARS

    def __post_init__(self) -> None:
        if not (
            math.isfinite(self.current_bfe)
            and math.isfinite(self.annual_rise_rate)
        ):
            msg = "current_bfe and annual_rise_rate must be finite numbers"
            raise ConfigurationError(msg)
        if self.current_bfe < 0:
            msg = "current_bfe must be non-negative"
            raise ConfigurationError(msg)
        if self.annual_rise_rate < 0:
            msg = "annual_rise_rate must be non-negative"
            raise ConfigurationError(msg)
        if not self.simulation_years:
            msg = "simulation_years must contain at least one year"
            raise ConfigurationError(msg)
        # Normalise to a sorted, duplicate-free tuple.
        object.__setattr__(
            self, "simulation_years", tuple(sorted(set(self.simulation_years)))
        )


@dataclass(frozen=True)
class ScoreThresholds:
    """Score cut-offs below which action is recommended."""

    critical_score: float = 60.0
    warning_score: float = 75.0

    def __post_init__(self) -> None:
        if not (
            math.isfinite(self.critical_score)
            and math.isfinite(self.warning_score)
        ):
            msg = "Score thresholds must be finite numbers"
            raise ConfigurationError(msg)
        if self.critical_score > self.warning_score:
            msg = "critical_score must not exceed warning_score"
            raise ConfigurationError(msg)

    def band(self, score: float) -> ResilienceBand:
        """Classify a score against the thresholds."""
        if score < self.critical_score:
            return ResilienceBand.CRITICAL
        if score < self.warning_score:
            return ResilienceBand.WARNING
        return ResilienceBand.ADEQUATE


@dataclass(frozen=True)
class EnhancerSettings:
    """Settings for the language-model recommendation enhancer."""

    api_key: str | None = None
    model: str = DEFAULT_LLM_MODEL
    timeout: float = 30.0

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)


@dataclass(frozen=True)
class ResilienceConfig:
    """Top-level configuration bundle."""

    weights: ScoringWeights = field(default_factory=ScoringWeights)
    flood: FloodParameters = field(default_factory=FloodParameters)
    thresholds: ScoreThresholds = field(default_factory=ScoreThresholds)
    enhancer: EnhancerSettings = field(default_factory=EnhancerSettings)
    cors_origins: tuple[str, ...] = ("http://localhost:3000",)
    log_level: str = "INFO"


# ---------------------------------------------------------------------------
# Environment loading
# ---------------------------------------------------------------------------


def _get_float(environ: Mapping[str, str], name: str, default: float) -> float:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        msg = f"{name} must be a number, got {raw!r}"
        raise ConfigurationError(msg) from None
    if not math.isfinite(value):
        msg = f"{name} must be a finite number, got {raw!r}"
        raise ConfigurationError(msg)
    return value


def _get_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        msg = f"{name} must be an integer, got {raw!r}"
        raise ConfigurationError(msg) from None


def _get_years(
    environ: Mapping[str, str], name: str, default: tuple[int, ...]
) -> tuple[int, ...]:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return tuple(int(part) for part in raw.split(",") if part.strip())
    except ValueError:
        msg = f"{name} must be a comma-separated list of years, got {raw!r}"
        raise ConfigurationError(msg) from None


def _get_list(
    environ: Mapping[str, str], name: str, default: tuple[str, ...]
) -> tuple[str, ...]:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def load_config(environ: Mapping[str, str] | None = None) -> ResilienceConfig:
    """Build a ResilienceConfig from environment variables.

    Parameters
    ----------
    environ
        Mapping to read from. Defaults to ``os.environ``.

    Raises
    ------
    ConfigurationError
        If a variable cannot be parsed or the resulting configuration is
        inconsistent (e.g. weights that do not sum to 1.0).
    """
    env = os.environ if environ is None else environ
    weight_defaults = ScoringWeights()
    flood_defaults = FloodParameters()
    threshold_defaults = ScoreThresholds()
    defaults = ResilienceConfig()

    weights = ScoringWeights(
        elevation=_get_float(
            env, "TIDEMARK_WEIGHT_ELEVATION", weight_defaults.elevation
        ),
        foundation=_get_float(
            env, "TIDEMARK_WEIGHT_FOUNDATION", weight_defaults.foundation
        ),
        materials=_get_float(
            env, "TIDEMARK_WEIGHT_MATERIALS", weight_defaults.materials
        ),
        mitigation=_get_float(
            env, "TIDEMARK_WEIGHT_MITIGATION", weight_defaults.mitigation
        ),
        utility_protection=_get_float(
            env, "TIDEMARK_WEIGHT_UTILITY", weight_defaults.utility_protection
        ),
    )
    flood = FloodParameters(
        current_bfe=_get_float(
            env, "TIDEMARK_CURRENT_BFE", flood_defaults.current_bfe
        ),
        annual_rise_rate=_get_float(
            env, "TIDEMARK_ANNUAL_RISE_RATE", flood_defaults.annual_rise_rate
        ),
        baseline_year=_get_int(
            env, "TIDEMARK_BASELINE_YEAR", flood_defaults.baseline_year
        ),
        simulation_years=_get_years(
            env, "TIDEMARK_SIMULATION_YEARS", flood_defaults.simulation_years
        ),
    )
    thresholds = ScoreThresholds(
        critical_score=_get_float(
            env, "TIDEMARK_CRITICAL_SCORE", threshold_defaults.critical_score
        ),
        warning_score=_get_float(
            env, "TIDEMARK_WARNING_SCORE", threshold_defaults.warning_score
        ),
    )
    enhancer = EnhancerSettings(
        api_key=env.get("ANTHROPIC_API_KEY") or None,
        model=env.get("TIDEMARK_LLM_MODEL") or DEFAULT_LLM_MODEL,
        timeout=_get_float(env, "TIDEMARK_LLM_TIMEOUT", 30.0),
    )

    return ResilienceConfig(
        weights=weights,
        flood=flood,
        thresholds=thresholds,
        enhancer=enhancer,
        cors_origins=_get_list(
            env, "TIDEMARK_CORS_ORIGINS", defaults.cors_origins
        ),
        log_level=(env.get("LOG_LEVEL") or defaults.log_level).upper(),
    )

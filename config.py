import logging

from dataclasses import dataclass

import yaml

from generators import DISTRIBUTIONS

logger = logging.getLogger(__name__)

ALGORITHMS = ("quickhull", "monotone_chain")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class AnalyzerConfig:
    algorithm: str = "quickhull"
    distribution: str = "uniform"
    n_points: int = 100
    seed: int | None = 42
    log_level: str = "INFO"
    plot: bool = False
    plot_path: str | None = None

    def __post_init__(self):
        if self.algorithm not in ALGORITHMS:
            raise ConfigError(f"Unknown algorithm: {self.algorithm}")
        if self.distribution not in DISTRIBUTIONS:
            raise ConfigError(f"Unknown distribution: {self.distribution}")
        if self.n_points <= 0:
            raise ConfigError(f"n_points must be positive, got {self.n_points}")
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {self.log_level}")


def load_config(path: str | None = None) -> AnalyzerConfig:
    """
    Load analyzer settings from YAML. Without a path, defaults are used.
    Missing keys fall back to defaults, unknown keys are rejected.
    """
    if path is None:
        return AnalyzerConfig()

    with open(path, 'r', encoding='utf-8') as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: expected a mapping at top level")

    known = AnalyzerConfig.__dataclass_fields__.keys()
    unknown = set(raw) - set(known)
    if unknown:
        raise ConfigError(f"{path}: unknown keys: {', '.join(sorted(unknown))}")

    if "log_level" in raw:
        raw["log_level"] = str(raw["log_level"]).upper()
    if "n_points" in raw:
        try:
            raw["n_points"] = int(raw["n_points"])
        except (TypeError, ValueError):
            raise ConfigError(f"{path}: n_points must be an integer") from None

    config = AnalyzerConfig(**raw)
    logger.debug("Loaded config from %s: %s", path, config)
    return config

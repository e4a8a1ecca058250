"""Configuration for ppeguard analyses.

Example YAML::

    confidence_threshold: 0.6
    work_environment: laboratory
    detector:
      seed: 42
      jitter: 0.1
    catalog:
      head_protection: [helmet, hard hat, bump cap]
    profiles:
      warehouse: [visibility, foot_protection]

Example:
    >>> from ppeguard.config import AnalysisConfig
    >>> config = AnalysisConfig.from_yaml("ppeguard.yaml")
    >>> registry = config.build_registry()
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from numbers import Integral
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from ppeguard.catalog import (
    DEFAULT_CATALOG,
    DEFAULT_EQUIPMENT_GROUPS,
    DEFAULT_PERSON_LABELS,
    EquipmentCatalog,
)
from ppeguard.errors import ConfigError
from ppeguard.normalizer import DEFAULT_CONFIDENCE_THRESHOLD
from ppeguard.policy import DEFAULT_REGISTRY, PolicyRegistry
from ppeguard.types import WorkEnvironment

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PPEGUARD_CONFIG"


@dataclass(frozen=True)
class AnalysisConfig:
    """Settings for one analyzer instance.

    Attributes:
        confidence_threshold: Detections must score strictly above this.
        work_environment: Profile used when a request names none.
        strict_profiles: Raise InvalidProfile for unknown profile names
            instead of falling back to ``general``.
        person_threshold: Confidence gate for person detections. None
            counts any person detection.
        detector_seed: Seed for the mock detector.
        detector_jitter: Jitter window for the mock detector.
        catalog: ``{category: [labels]}`` replacing the default catalog.
        person_labels: Labels meaning "person" (default: ``person``).
        profiles: ``{name: [categories]}`` added to the built-in profiles.
    """

    confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD
    work_environment: str = WorkEnvironment.CONSTRUCTION.value
    strict_profiles: bool = False
    person_threshold: Optional[float] = None
    detector_seed: Optional[int] = None
    detector_jitter: float = 0.2
    catalog: Optional[Mapping[str, List[str]]] = None
    person_labels: Optional[List[str]] = None
    profiles: Optional[Mapping[str, List[str]]] = None

    def __post_init__(self) -> None:
        _check_unit_interval("confidence_threshold", self.confidence_threshold)
        if self.person_threshold is not None:
            _check_unit_interval("person_threshold", self.person_threshold)
        if self.detector_jitter < 0:
            raise ConfigError(f"detector_jitter must be >= 0, got {self.detector_jitter}")
        if not isinstance(self.strict_profiles, bool):
            raise ConfigError(f"strict_profiles must be true or false, got {self.strict_profiles!r}")
        if self.detector_seed is not None and (
            isinstance(self.detector_seed, bool)
            or not isinstance(self.detector_seed, Integral)
            or self.detector_seed < 0
        ):
            raise ConfigError(f"detector seed must be a non-negative integer, got {self.detector_seed!r}")
        # surface catalog and profile mistakes at load time, not mid-analysis
        if self.catalog is not None or self.person_labels is not None:
            self.build_catalog()
        if self.profiles is not None:
            self.build_registry()

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> AnalysisConfig:
        """Create an AnalysisConfig from a dictionary (e.g. loaded from YAML).

        Raises:
            ConfigError: If a value has the wrong type or range.
        """
        data = data or {}
        if not isinstance(data, Mapping):
            raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")

        detector = data.get("detector") or {}
        if not isinstance(detector, Mapping):
            raise ConfigError(f"'detector' must be a mapping, got {type(detector).__name__}")
        try:
            return cls(
                confidence_threshold=float(data.get("confidence_threshold", DEFAULT_CONFIDENCE_THRESHOLD)),
                work_environment=str(data.get("work_environment", WorkEnvironment.CONSTRUCTION.value)),
                strict_profiles=data.get("strict_profiles", False),
                person_threshold=_optional_float(data.get("person_threshold")),
                detector_seed=_optional_int(detector.get("seed", data.get("detector_seed"))),
                detector_jitter=float(detector.get("jitter", data.get("detector_jitter", 0.2))),
                catalog=data.get("catalog"),
                person_labels=data.get("person_labels"),
                profiles=data.get("profiles"),
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid config value: {e}") from e

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> AnalysisConfig:
        """Load an AnalysisConfig from a YAML file.

        Raises:
            ConfigError: If the file is missing or not valid YAML.
        """
        path = Path(yaml_path)
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        logger.debug("Loaded config from %s", path)
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "confidence_threshold": self.confidence_threshold,
            "work_environment": self.work_environment,
            "strict_profiles": self.strict_profiles,
            "person_threshold": self.person_threshold,
            "detector": {"seed": self.detector_seed, "jitter": self.detector_jitter},
        }
        if self.catalog is not None:
            data["catalog"] = {k: list(v) for k, v in self.catalog.items()}
        if self.person_labels is not None:
            data["person_labels"] = list(self.person_labels)
        if self.profiles is not None:
            data["profiles"] = {k: list(v) for k, v in self.profiles.items()}
        return data

    def build_catalog(self) -> EquipmentCatalog:
        if self.catalog is None and self.person_labels is None:
            return DEFAULT_CATALOG
        groups = self.catalog if self.catalog is not None else DEFAULT_EQUIPMENT_GROUPS
        person_labels = self.person_labels if self.person_labels is not None else DEFAULT_PERSON_LABELS
        return EquipmentCatalog.from_groups(groups, person_labels=person_labels)

    def build_registry(self) -> PolicyRegistry:
        if not self.profiles:
            return DEFAULT_REGISTRY
        return PolicyRegistry.from_dict(self.profiles)


def load_config(path: str | Path | None = None) -> AnalysisConfig:
    """Load configuration.

    Resolution order:
        1. ``path`` argument.
        2. ``PPEGUARD_CONFIG`` environment variable.
        3. Built-in defaults.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or None
    if path is None:
        return AnalysisConfig()
    return AnalysisConfig.from_yaml(path)


def _check_unit_interval(name: str, value: float) -> None:
    if not (0.0 <= value <= 1.0):
        raise ConfigError(f"{name} must be within [0, 1], got {value}")


def _optional_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


def _optional_int(value: Any) -> Optional[int]:
    return None if value is None else int(value)


__all__ = ["AnalysisConfig", "CONFIG_ENV_VAR", "load_config"]

"""
Configuration Loader - Default YAML plus Optional Profile.

Resolution order:
    1. The given YAML file, or the shipped config/default.yaml
    2. An optional profile from the profiles/ directory next to that file,
       deep-merged on top (e.g. "instant" turns the analysis delay off)
    3. Pydantic validation into ValuationConfig

When no file is given and the shipped default is not available (for
example in a wheel install), the model defaults are used; they match
config/default.yaml.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from site_valuator.config.models import ValuationConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[3] / "config" / "default.yaml"
PROFILES_DIR = "profiles"


class ConfigLoader:
    """Loads a ValuationConfig from YAML with an optional profile overlay."""

    def __init__(self, default_path: Path = DEFAULT_CONFIG_PATH) -> None:
        self.default_path = default_path

    def load(
        self,
        config_path: Optional[Union[str, Path]] = None,
        profile: Optional[str] = None,
    ) -> ValuationConfig:
        """
        Load and validate configuration.

        Args:
            config_path: YAML file; the shipped default if None
            profile: Name of a profile under <config dir>/profiles/

        Returns:
            Validated ValuationConfig

        Raises:
            FileNotFoundError: If config_path or the profile does not exist
            pydantic.ValidationError: If a value is invalid
        """
        path = Path(config_path) if config_path is not None else self.default_path
        if config_path is None and not path.exists():
            logger.debug(f"No default config at {path}, using model defaults")
            settings: Dict[str, Any] = {}
        else:
            settings = _read_yaml(path)

        if profile:
            profile_path = path.parent / PROFILES_DIR / f"{profile}.yaml"
            if not profile_path.exists():
                raise FileNotFoundError(f"Profile not found: {profile} ({profile_path})")
            settings = _deep_merge(settings, _read_yaml(profile_path))

        config = ValuationConfig.model_validate(settings)
        self._warn_on_disabled_default(config)
        logger.debug(f"Loaded configuration from {path} (profile={profile})")
        return config

    @staticmethod
    def _warn_on_disabled_default(config: ValuationConfig) -> None:
        default = config.global_settings.default_strategy
        section = getattr(config, default, None)
        if section is not None and not section.enabled:
            logger.warning(
                f"Default strategy {default!r} is disabled; "
                f"requests without an explicit strategy will fail"
            )


def _read_yaml(path: Path) -> Dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _deep_merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in overlay.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    profile: Optional[str] = None,
) -> ValuationConfig:
    """
    Load configuration; see ConfigLoader.load.

    Example:
        >>> config = load_config(profile="instant")
        >>> config.heuristic.analysis_delay_seconds
        0.0
    """
    return ConfigLoader().load(config_path, profile)

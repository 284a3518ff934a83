"""Configuration management for propsguard.

Settings live under ``[tool.propsguard]`` in pyproject.toml:

    [tool.propsguard]
    exclude = ["node_modules", "legacy/"]
    extensions = [".tsx", ".jsx"]

    [tool.propsguard.rules]
    force-destructure-props = "warning"   # "error" | "warning" | "off"
"""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from propsguard.rules import RULES
from propsguard.rules.base import Severity
from propsguard.utils.constants import DEFAULT_EXCLUDES, LANGUAGE_BY_EXTENSION
from propsguard.utils.logging import logger

KNOWN_KEYS = frozenset(["rules", "exclude", "extensions"])

# Named rule presets; "recommended" is the default rule set
PRESETS: dict[str, dict[str, Severity]] = {
    "recommended": {"force-destructure-props": Severity.ERROR},
}


@dataclass
class PropsGuardConfig:
    """Effective configuration for one run."""

    rules: dict[str, Severity] = field(default_factory=lambda: dict(PRESETS["recommended"]))
    exclude: list[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDES))
    extensions: list[str] = field(default_factory=lambda: sorted(LANGUAGE_BY_EXTENSION))
    source: Path | None = None

    def severity_for(self, rule_name: str) -> Severity:
        return self.rules.get(rule_name, Severity.OFF)

    def enabled_rules(self) -> list[str]:
        return [name for name, sev in self.rules.items() if sev is not Severity.OFF]

    @property
    def language_map(self) -> dict[str, str]:
        return {ext: lang for ext, lang in LANGUAGE_BY_EXTENSION.items() if ext in self.extensions}


def find_pyproject(start: Path | str) -> Path | None:
    """Nearest pyproject.toml at or above start."""
    current = Path(start).resolve()
    if current.is_file():
        current = current.parent

    for directory in [current, *current.parents]:
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def _string_list(value: Any, key: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"[tool.propsguard] {key} must be a list of strings, got {value!r}")
    return list(value)


def parse_config(data: dict[str, Any], source: Path | None = None) -> PropsGuardConfig:
    """Build a PropsGuardConfig from the ``[tool.propsguard]`` table."""
    config = PropsGuardConfig(source=source)

    for key in data:
        if key not in KNOWN_KEYS:
            logger.warning(f"Ignoring unknown [tool.propsguard] key: {key}")

    rules = data.get("rules", {})
    if not isinstance(rules, dict):
        raise ValueError(f"[tool.propsguard] rules must be a table, got {rules!r}")
    for name, value in rules.items():
        if name not in RULES:
            logger.warning(f"Ignoring unknown rule in config: {name}")
            continue
        config.rules[name] = Severity.parse(value)

    if "exclude" in data:
        config.exclude = _string_list(data["exclude"], "exclude")

    if "extensions" in data:
        raw = _string_list(data["extensions"], "extensions")
        extensions = [e if e.startswith(".") else f".{e}" for e in raw]
        unsupported = [e for e in extensions if e not in LANGUAGE_BY_EXTENSION]
        if unsupported:
            raise ValueError(
                f"Unsupported extensions {unsupported}; supported: {sorted(LANGUAGE_BY_EXTENSION)}"
            )
        config.extensions = extensions

    return config


def load_config(config_path: Path | str | None = None, start: Path | str = ".") -> PropsGuardConfig:
    """Load configuration from an explicit file or the nearest pyproject.toml.

    Raises:
        FileNotFoundError: config_path was given but does not exist
        ValueError: the file is not valid TOML or has invalid values
    """
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        path = find_pyproject(start)
        if path is None:
            logger.debug("No pyproject.toml found, using defaults")
            return PropsGuardConfig()

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {path}: {e}") from e

    section = data.get("tool", {}).get("propsguard")
    if section is None:
        logger.debug(f"No [tool.propsguard] section in {path}, using defaults")
        return PropsGuardConfig(source=path)

    logger.debug(f"Loaded configuration from {path}")
    return parse_config(section, source=path)

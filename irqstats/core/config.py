"""Configuration loading with layered overrides."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from irqstats.core.errors import IrqStatsError
from irqstats.core.parser import INTERRUPTS, MAX_IRQS
from irqstats.core.rules import RuleSet, select_description_rule

if TYPE_CHECKING:
    from irqstats.core.context import Context


CONFIG_ENV = "IRQSTATS_CONFIG"

DEFAULTS: dict[str, Any] = {
    "interrupts_path": INTERRUPTS,
    "architecture": None,
    "max_irqs": MAX_IRQS,
    "skip_labels": [],
    "log_dir": None,
}


class ConfigError(IrqStatsError):
    """Invalid configuration value."""

    pass


@dataclass
class Settings:
    """Resolved plugin settings."""

    interrupts_path: str = INTERRUPTS
    architecture: str = ""
    max_irqs: int = MAX_IRQS
    skip_labels: list[str] = field(default_factory=list)
    log_dir: Path | None = None

    def rules(self) -> RuleSet:
        """Description rules for the configured architecture."""
        return select_description_rule(self.architecture, frozenset(self.skip_labels))


def load_config_file(path: Path, context: "Context") -> dict[str, Any]:
    """Load a YAML config file if it exists."""
    if not context.file_exists(str(path)):
        return {}
    try:
        data = yaml.safe_load(context.read_file(str(path)))
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def config_paths(context: "Context") -> list[Path]:
    """Config files in precedence order (first wins)."""
    paths = []
    explicit = context.get_env(CONFIG_ENV)
    if explicit:
        paths.append(Path(explicit))

    home = Path(context.get_env("HOME", "/tmp"))
    paths.append(home / ".config" / "irqstats" / "config.yaml")
    return paths


def get_config_value(key: str, context: "Context") -> Any:
    """Get config value with $IRQSTATS_CONFIG -> user -> default precedence."""
    for path in config_paths(context):
        data = load_config_file(path, context)
        if key in data:
            return data[key]

    return DEFAULTS.get(key)


def load_settings(context: "Context") -> Settings:
    """
    Resolve all settings.

    Args:
        context: Execution context

    Returns:
        Settings with defaults filled in

    Raises:
        ConfigError: If a value has the wrong type
    """
    max_irqs = get_config_value("max_irqs", context)
    if isinstance(max_irqs, bool) or not isinstance(max_irqs, int) or max_irqs < 1:
        raise ConfigError(f"max_irqs must be a positive integer, got {max_irqs!r}")

    skip_labels = get_config_value("skip_labels", context) or []
    if not isinstance(skip_labels, list):
        raise ConfigError(f"skip_labels must be a list, got {skip_labels!r}")

    log_dir = get_config_value("log_dir", context)

    return Settings(
        interrupts_path=str(get_config_value("interrupts_path", context) or INTERRUPTS),
        architecture=str(get_config_value("architecture", context) or context.machine()),
        max_irqs=max_irqs,
        skip_labels=[str(label) for label in skip_labels],
        log_dir=Path(log_dir).expanduser() if log_dir else None,
    )

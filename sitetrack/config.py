"""
Configuration loader for SiteTrack.

Loads settings from sitetrack_config.yaml and provides typed access
to all configuration sections.
"""
from pathlib import Path
from typing import Any, Optional
from functools import lru_cache

import yaml

from sitetrack.domain.entities import RiskThresholds


# Default config path relative to project root
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "sitetrack_config.yaml"


class ConfigurationError(Exception):
    """Raised when configuration loading or validation fails."""
    pass


class SiteTrackConfig:
    """
    Configuration manager for SiteTrack.

    Loads YAML configuration and provides typed access to all sections.
    Use get_config() to obtain the singleton instance.
    """

    def __init__(self, config_path: Optional[Path] = None):
        self._config_path = config_path or DEFAULT_CONFIG_PATH
        self._config: dict = {}
        self._load()

    def _load(self) -> None:
        """Load configuration from YAML file."""
        if not self._config_path.exists():
            raise ConfigurationError(f"Config file not found: {self._config_path}")

        try:
            with open(self._config_path, 'r', encoding='utf-8') as f:
                self._config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in config file: {e}")

        if not isinstance(self._config, dict):
            raise ConfigurationError("Config file must contain a YAML mapping")

    def reload(self) -> None:
        """Reload configuration from disk."""
        self._load()
        get_config.cache_clear()

    @property
    def version(self) -> str:
        """Configuration file version."""
        return self._config.get("version", "unknown")

    # =========================================================================
    # Risk Classification
    # =========================================================================

    @property
    def risk(self) -> dict:
        """Risk threshold configuration."""
        return self._config.get("risk", {})

    @property
    def risk_thresholds(self) -> RiskThresholds:
        """
        Risk thresholds as a RiskThresholds value.

        Raises:
            ConfigurationError: If the thresholds are inconsistent
        """
        try:
            return RiskThresholds(
                danger_margin=float(self.risk.get("danger_margin", 5)),
                warning_margin=float(self.risk.get("warning_margin", 15)),
                deadline_warning_days=int(self.risk.get("deadline_warning_days", 7)),
            )
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid risk thresholds: {e}")

    # =========================================================================
    # Cost Lines
    # =========================================================================

    @property
    def cost_labels(self) -> dict:
        """
        Display labels for the snapshot cost lines.

        Keys are the cost lines of a snapshot: labor (from daily reports)
        and the material, outsource and other execution cost categories.
        """
        labels = {
            "labor": "Labor",
            "material": "Material",
            "outsource": "Outsource",
            "other": "Other",
        }
        labels.update(self._config.get("cost_labels", {}))
        return labels

    def get_cost_label(self, line: str) -> str:
        """Get display label for a cost line, falling back to the key."""
        return self.cost_labels.get(line, line)

    # =========================================================================
    # =========================================================================
    # Reporting
    # =========================================================================

    @property
    def reporting(self) -> dict:
        """Reporting configuration."""
        return self._config.get("reporting", {})

    @property
    def currency_config(self) -> dict:
        """Currency formatting configuration."""
        return self.reporting.get("currency", {
            "symbol": "",
            "decimal_places": 0,
            "thousands_separator": ","
        })

    @property
    def margin_decimal_places(self) -> int:
        """Decimal places used when printing margin rates."""
        return self.reporting.get("margin_decimal_places", 1)

    def format_currency(self, amount) -> str:
        """Format an amount using the currency settings."""
        cfg = self.currency_config
        places = cfg.get("decimal_places", 0)
        text = f"{float(amount):,.{places}f}"
        sep = cfg.get("thousands_separator", ",")
        if sep != ",":
            text = text.replace(",", sep)
        return f"{cfg.get('symbol', '')}{text}"

    # =========================================================================
    # Data Files
    # =========================================================================

    @property
    def data_files(self) -> dict:
        """File names read by the dataset loader."""
        return self._config.get("data", {}).get("files", {
            "sites": "sites.csv",
            "daily_reports": "daily_reports.csv",
            "execution_costs": "execution_costs.csv",
            "payments": "payments.csv",
        })

    # =========================================================================
    # Raw Access
    # =========================================================================

    def get(self, key: str, default: Any = None) -> Any:
        """Get a top-level config value by key."""
        return self._config.get(key, default)

    def __getitem__(self, key: str) -> Any:
        """Dictionary-style access to config."""
        return self._config[key]

    def __contains__(self, key: str) -> bool:
        """Check if key exists in config."""
        return key in self._config


@lru_cache(maxsize=1)
def get_config(config_path: Optional[str] = None) -> SiteTrackConfig:
    """
    Get the singleton configuration instance.

    Args:
        config_path: Optional path to config file. The instance is cached per
            path; calling with a different path loads and caches a new
            instance, replacing the previous one.

    Returns:
        SiteTrackConfig singleton instance
    """
    path = Path(config_path) if config_path else None
    return SiteTrackConfig(path)


def reload_config() -> SiteTrackConfig:
    """Reload configuration from disk and return new instance."""
    get_config.cache_clear()
    return get_config()

"""
DeliveryPilot Configuration Loader

Loads and validates shop configuration documents from YAML or JSON files.

Converts Pydantic schema models to DeliveryPilot domain models.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from ..engine import RuleMatcher
from ..exceptions import ConfigLoadError, ConfigValidationError
from ..logging_config import get_logger
from ..models import GlobalSettings, Rule
from .schema import (
    ConfigV2Schema,
    RuleSchema,
    ShopConfigSchema,
    validate_shop_config,
)

logger = get_logger("config")


# =============================================================================
# Loaded Configuration
# =============================================================================

@dataclass(frozen=True)
class ShopConfig:
    """
    A validated shop configuration.

    Attributes:
        shop: Shop domain, when the document names one
        settings: Shop-wide settings
        rules: Rules of the active rule set, in evaluation order
        active_profile_id: Active profile (version 2 documents only)
    """
    shop: Optional[str]
    settings: GlobalSettings
    rules: list[Rule] = field(default_factory=list)
    active_profile_id: Optional[str] = None

    @property
    def matcher(self) -> RuleMatcher:
        return RuleMatcher(self.rules)


# =============================================================================
# Integrity Checks
# =============================================================================

def check_rule_integrity(rules: list[RuleSchema], path: str = "") -> None:
    """
    Validate the rule list as a whole.

    Catches duplicate rule IDs. Rules that can never match (no handles,
    no tags, not a fallback) are legal but logged.

    Raises:
        ValueError: If integrity errors are found
    """
    errors = []
    seen: set[str] = set()
    for rule in rules:
        if rule.id in seen:
            errors.append(f"Duplicate rule ID: '{rule.id}'")
        seen.add(rule.id)

        is_fallback = rule.match.is_fallback in (True, "true")
        if not is_fallback and not rule.match.product_handles and not rule.match.tags:
            logger.warning(
                "Rule '%s' has no match criteria and will never match",
                rule.id,
                extra={"rule_id": rule.id},
            )

    if errors:
        path_str = f" in {path}" if path else ""
        raise ValueError(
            f"Rule integrity errors{path_str}:\n" +
            "\n".join(f"  - {e}" for e in errors)
        )


# =============================================================================
# Schema to Model Conversion
# =============================================================================

def _convert_shop_config(schema: ShopConfigSchema) -> ShopConfig:
    active_profile_id = None
    if isinstance(schema.config, ConfigV2Schema):
        active_profile_id = schema.config.active_profile().id

    return ShopConfig(
        shop=schema.shop,
        settings=GlobalSettings.from_dict(schema.settings.model_dump()),
        rules=[Rule.from_dict(r.model_dump()) for r in schema.config.active_rules()],
        active_profile_id=active_profile_id,
    )


# =============================================================================
# Configuration Loader
# =============================================================================

class ConfigLoader:
    """
    Loads shop configurations from YAML or JSON files.

    Usage:
        loader = ConfigLoader()
        config = loader.load("path/to/shop.yaml")
        loader.get(config.shop)
    """

    def __init__(self) -> None:
        self._configs: dict[str, ShopConfig] = {}

    def load(self, path: Union[str, Path]) -> ShopConfig:
        """
        Load a shop configuration from a file.

        Raises:
            ConfigLoadError: If the file cannot be read or parsed
            ConfigValidationError: If validation fails
        """
        path = Path(path)
        try:
            data = self._load_file(path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigLoadError(
                message=f"Failed to load configuration: {e}",
                details={"path": str(path), "error": str(e)},
            ) from e
        return self.load_dict(data, source=str(path))

    def load_dict(self, data: Any, source: str = "<memory>") -> ShopConfig:
        """
        Validate and register an already-parsed configuration document.

        Args:
            data: Parsed document
            source: Where the document came from, for error details
        """
        if not isinstance(data, dict):
            raise ConfigLoadError(
                message="Configuration document must be a mapping",
                details={"path": source, "type": type(data).__name__},
            )

        try:
            schema = validate_shop_config(data)
        except ValidationError as e:
            raise ConfigValidationError(
                message=f"Configuration validation failed: {e.error_count()} errors",
                details={"errors": e.errors(include_url=False, include_context=False), "path": source},
                shop=data.get("shop") if isinstance(data.get("shop"), str) else None,
            ) from e

        try:
            check_rule_integrity(schema.config.active_rules(), source)
        except ValueError as e:
            raise ConfigValidationError(
                message="Rule integrity validation failed",
                details={"errors": str(e), "path": source},
                shop=schema.shop,
            ) from e

        config = _convert_shop_config(schema)
        if config.shop:
            self._configs[config.shop] = config

        logger.info(
            "Loaded configuration from %s (%d rules)",
            source,
            len(config.rules),
            extra={"shop": config.shop},
        )
        return config

    def _load_file(self, path: Path) -> Any:
        """Load data from YAML or JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() in {".yaml", ".yml"}:
                return yaml.safe_load(f)
            elif path.suffix.lower() == ".json":
                return json.load(f)
            else:
                # YAML is a superset of JSON
                return yaml.safe_load(f.read())

    def get(self, shop: str) -> Optional[ShopConfig]:
        """Get a cached configuration by shop domain."""
        return self._configs.get(shop)

    def list_shops(self) -> list[str]:
        """List domains of all loaded shops."""
        return list(self._configs.keys())


# =============================================================================
# Convenience Functions
# =============================================================================

def load_shop_config(path: Union[str, Path]) -> ShopConfig:
    """
    Load a shop configuration from a file.

    Convenience function that creates a temporary loader.
    """
    return ConfigLoader().load(path)


def load_shop_config_from_string(content: str, format: str = "yaml") -> ShopConfig:
    """
    Load a shop configuration from a string.

    Args:
        content: YAML or JSON string
        format: "yaml" or "json"
    """
    try:
        if format.lower() == "json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (ValueError, yaml.YAMLError) as e:
        raise ConfigLoadError(
            message=f"Failed to parse configuration: {e}",
            details={"format": format, "error": str(e)},
        ) from e
    return ConfigLoader().load_dict(data, source=f"<{format}>")

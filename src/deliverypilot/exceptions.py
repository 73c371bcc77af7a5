"""
DeliveryPilot Exception Hierarchy

Errors raised by the collaborators around the schedule engine (config
loading, schema validation, rule lookup). The engine itself never raises:
every calendar or configuration edge case has a local fallback.

Exception codes follow the pattern: DP_<CATEGORY>_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class DeliveryPilotError(Exception):
    """
    Base exception for all DeliveryPilot errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (DP_*)
        details: Additional context about the error
        shop: Shop the failing configuration belongs to, if known
    """
    message: str
    code: str = "DP_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)
    shop: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.shop:
            parts.append(f"(shop: {self.shop})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/API responses."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.shop:
            result["shop"] = self.shop
        return result


# =============================================================================
# Configuration Errors
# =============================================================================

@dataclass
class ConfigLoadError(DeliveryPilotError):
    """Failed to read or parse a configuration document."""
    code: str = "DP_CONFIG_LOAD_ERROR"


@dataclass
class ConfigValidationError(DeliveryPilotError):
    """Configuration document failed schema validation."""
    code: str = "DP_CONFIG_VALIDATION_ERROR"


# =============================================================================
# Rule Errors
# =============================================================================

@dataclass
class RuleNotFoundError(DeliveryPilotError):
    """No rule (not even a fallback rule) applies to the product."""
    code: str = "DP_RULE_NOT_FOUND"

"""Request schemas for the API."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from deliverypilot.config import RuleSchema, SettingsSchema


class CartInput(BaseModel):
    """Cart state for free-delivery placeholders."""
    total: int = Field(default=0, ge=0, description="Cart total in minor currency units")
    handles: list[str] = Field(default=[], description="Handles of products in the cart")
    tags: list[str] = Field(default=[], description="Tags of products in the cart")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"total": 2500, "handles": ["linen-shirt"], "tags": ["summer"]},
            ]
        }
    }


class PreviewRequest(BaseModel):
    """Request to preview a schedule and messages for unsaved settings."""
    settings: SettingsSchema = Field(default_factory=SettingsSchema, description="Shop-wide settings")
    rule: Optional[RuleSchema] = Field(default=None, description="Rule being edited")
    now: Optional[datetime] = Field(default=None, description="Evaluation instant (defaults to current time)")
    timezone: Optional[str] = Field(default=None, description="IANA timezone, overrides preview_timezone")
    countdown: Optional[str] = Field(default=None, description="Live countdown value for {countdown}")
    templates: list[str] = Field(default=[], description="Extra templates to render")
    cart: Optional[CartInput] = Field(default=None, description="Cart state for free delivery")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "settings": {
                        "cutoff_time": "14:00",
                        "closed_days": ["sat", "sun"],
                        "bank_holiday_country": "GB",
                        "preview_timezone": "Europe/London",
                    },
                    "rule": {
                        "id": "default",
                        "name": "Default",
                        "match": {"is_fallback": True},
                        "settings": {
                            "message_line_1": "Order within **{countdown}**",
                            "message_line_2": "Arrives **{arrival}**",
                            "eta_delivery_days_min": 1,
                            "eta_delivery_days_max": 3,
                        },
                    },
                    "now": "2025-02-03T10:00:00Z",
                }
            ]
        }
    }


class StorefrontRequest(BaseModel):
    """Request for the storefront messages of one product."""
    shop: Optional[str] = Field(default=None, description="Shop domain (defaults to the loaded shop)")
    handle: Optional[str] = Field(default=None, description="Product handle")
    tags: list[str] = Field(default=[], description="Product tags")
    now: Optional[datetime] = Field(default=None, description="Evaluation instant (defaults to current time)")
    countdown: Optional[str] = Field(default=None, description="Live countdown value for {countdown}")
    cart: Optional[CartInput] = Field(default=None, description="Cart state for free delivery")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "shop": "example.myshopify.com",
                    "handle": "linen-shirt",
                    "tags": ["summer", "apparel"],
                }
            ]
        }
    }

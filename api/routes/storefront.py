"""Storefront message endpoint."""

from typing import Optional

from fastapi import APIRouter, HTTPException

from api.message_builder import build_messages
from api.schemas.requests import StorefrontRequest
from api.schemas.responses import MessagesResponse
from deliverypilot.config import ConfigLoader, ShopConfig
from deliverypilot.exceptions import RuleNotFoundError

router = APIRouter(prefix="/storefront", tags=["Storefront"])

# Shared loader instance (set by main.py)
loader: Optional[ConfigLoader] = None


def set_loader(l: ConfigLoader):
    global loader
    loader = l


def _resolve_config(shop: Optional[str]) -> ShopConfig:
    if loader is None:
        raise HTTPException(status_code=404, detail="No shop configuration loaded")

    if shop:
        config = loader.get(shop)
        if config is None:
            raise HTTPException(status_code=404, detail=f"Shop '{shop}' not found")
        return config

    shops = loader.list_shops()
    if len(shops) != 1:
        raise HTTPException(
            status_code=404,
            detail=f"Specify a shop. Available: {shops}",
        )
    return loader.get(shops[0])


@router.post("/message", response_model=MessagesResponse)
async def storefront_message(request: StorefrontRequest):
    """
    Messages for a product page.

    The product's handle and tags select the rule (regular rules first,
    then the fallback rule); the result is built exactly as in the preview.
    """
    config = _resolve_config(request.shop)

    try:
        rule = config.matcher.require(request.handle, request.tags)
    except RuleNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.to_dict())

    return build_messages(
        config.settings,
        rule,
        now=request.now,
        countdown=request.countdown,
        cart=request.cart,
        shop=config.shop,
    )

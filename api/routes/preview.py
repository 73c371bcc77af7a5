"""Admin preview endpoint."""

from fastapi import APIRouter

from api.message_builder import build_messages
from api.schemas.requests import PreviewRequest
from api.schemas.responses import MessagesResponse
from deliverypilot.models import GlobalSettings, Rule

router = APIRouter(prefix="/preview", tags=["Preview"])


@router.post("", response_model=MessagesResponse)
async def preview(request: PreviewRequest):
    """
    Preview the schedule, ETA timeline and messages for unsaved settings.

    Settings and rule are validated the same way saved configuration is,
    then run through the same builder as the storefront.
    """
    settings = GlobalSettings.from_dict(request.settings.model_dump())
    rule = Rule.from_dict(request.rule.model_dump()) if request.rule is not None else None

    return build_messages(
        settings,
        rule,
        now=request.now,
        timezone_name=request.timezone,
        countdown=request.countdown,
        cart=request.cart,
        extra_templates=request.templates,
    )

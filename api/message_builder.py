"""
Message Builder -- runs settings and a rule through the schedule engine and
template renderer and returns the response the admin preview and the
storefront both consume.

No FastAPI code here. Both routes call ``build_messages`` so a preview
always matches what shoppers see.

Pipeline:
  1. Compute the schedule once
  2. Build the ETA timeline
  3. Render the rule's message lines and any extra templates
  4. Work out free-delivery progress and render its message
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from deliverypilot.engine import (
    ScheduleEngine,
    build_eta_timeline,
    format_delivery_window,
    format_express_date,
)
from deliverypilot.models import ComputedSchedule, GlobalSettings, Rule
from deliverypilot.rendering import (
    FreeDeliveryProgress,
    RenderedMessage,
    TemplateRenderer,
    countdown_text,
    is_excluded_product,
)

from api.schemas.requests import CartInput
from api.schemas.responses import (
    EtaStageResult,
    FreeDeliveryResult,
    MessageResult,
    MessagesResponse,
    ScheduleResult,
)

_engine = ScheduleEngine()


def _message_result(message: RenderedMessage) -> MessageResult:
    return MessageResult(
        html=message.to_html(),
        text=message.to_plain_text(),
        lines=[[{"text": s.text, "bold": s.bold} for s in line] for line in message.lines],
    )


def _schedule_result(schedule: ComputedSchedule) -> ScheduleResult:
    return ScheduleResult(
        order_date=schedule.order_date.isoformat(),
        shipping_date=schedule.shipping_date.isoformat(),
        delivery_date_min=schedule.delivery_date_min.isoformat(),
        delivery_date_max=schedule.delivery_date_max.isoformat(),
        express_date=schedule.express_date.isoformat(),
        delivery_window=format_delivery_window(schedule.delivery_date_min, schedule.delivery_date_max),
        express_label=format_express_date(schedule.express_date),
        ships_today=schedule.ships_today,
        cutoff_at=schedule.cutoff_at.isoformat() if schedule.cutoff_at else None,
        countdown=countdown_text(schedule),
        degraded=schedule.degraded,
    )


def cart_progress(settings: GlobalSettings, cart: Optional[CartInput]) -> FreeDeliveryProgress:
    """Free-delivery progress for a cart; an absent cart is empty."""
    if cart is None:
        return FreeDeliveryProgress.from_cart(settings.fd_threshold, 0)
    excluded = is_excluded_product(settings, None, cart.tags) or any(
        is_excluded_product(settings, h) for h in cart.handles
    )
    return FreeDeliveryProgress.from_cart(settings.fd_threshold, cart.total, excluded)


def build_messages(
    settings: GlobalSettings,
    rule: Optional[Rule] = None,
    now: Optional[datetime] = None,
    timezone_name: Optional[str] = None,
    countdown: Optional[str] = None,
    cart: Optional[CartInput] = None,
    extra_templates: Sequence[str] = (),
    shop: Optional[str] = None,
) -> MessagesResponse:
    """
    Compute the schedule and render every message for one product.

    The schedule is computed once and shared by the timeline and all
    templates.
    """
    schedule = _engine.compute(settings, rule, now=now, timezone_name=timezone_name)
    renderer = TemplateRenderer(settings, rule, engine=_engine)
    progress = cart_progress(settings, cart)

    messages = renderer.render_rule_messages(countdown=countdown, progress=progress, schedule=schedule)
    extra = renderer.render_many(list(extra_templates), countdown=countdown, progress=progress, schedule=schedule)

    free_delivery = None
    if settings.fd_enabled:
        template = progress.message_template(settings)
        rendered = None
        if template:
            rendered = renderer.render(template, countdown=countdown, progress=progress, schedule=schedule)
        free_delivery = FreeDeliveryResult(
            state=progress.state.value,
            threshold=progress.threshold,
            cart_total=progress.cart_total,
            remaining=progress.remaining,
            percent=progress.percent,
            message=_message_result(rendered) if rendered is not None else None,
        )

    return MessagesResponse(
        shop=shop,
        rule_id=rule.id if rule is not None else None,
        rule_name=rule.name if rule is not None else None,
        schedule=_schedule_result(schedule),
        timeline=[
            EtaStageResult(kind=stage.kind.value, label=stage.label, date=stage.date_text)
            for stage in build_eta_timeline(schedule, rule)
        ],
        messages=[_message_result(m) for m in messages],
        extra_messages=[_message_result(m) for m in extra],
        free_delivery=free_delivery,
    )

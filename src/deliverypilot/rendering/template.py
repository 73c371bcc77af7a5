"""
DeliveryPilot Template Renderer

Turns merchant-authored message templates into display-ready lines.

Recognized markup:
    {arrival}     delivery window, e.g. "Feb 12–14"
    {express}     express arrival, e.g. "Thu, Feb 6"
    {countdown}   time left until today's cutoff, e.g. "2h 34m"
    {threshold}   free-delivery threshold
    {remaining}   amount left to reach the threshold
    {cart_total}  current cart value
    {lb}          line break
    **text**      bold

Rendering is a fixed sequence of passes, each of which leaves nothing for
an earlier pass to do:

1. currency placeholders
2. date placeholders (the schedule is computed only if one is present)
3. line breaks, splitting the text into lines
4. bold spans within each line
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from html import escape
from typing import Callable, Optional, Sequence

from ..engine import (
    ScheduleEngine,
    format_delivery_window,
    format_express_date,
    format_remaining,
)
from ..models import ComputedSchedule, GlobalSettings, Rule
from .free_delivery import FreeDeliveryProgress
from .money import format_money

LINE_BREAK = "{lb}"
CURRENCY_PLACEHOLDERS = ("{threshold}", "{remaining}", "{cart_total}")
DATE_PLACEHOLDERS = ("{arrival}", "{express}", "{countdown}")

_BOLD = re.compile(r"\*\*(.+?)\*\*")


# =============================================================================
# Output
# =============================================================================

@dataclass(frozen=True)
class Span:
    """A run of text with uniform weight."""
    text: str
    bold: bool = False


@dataclass
class RenderedMessage:
    """A rendered template: lines of spans."""
    lines: list[list[Span]] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not any(span.text for line in self.lines for span in line)

    def to_html(self) -> str:
        """Escaped HTML with <strong> for bold and <br/> between lines."""
        rendered = []
        for line in self.lines:
            parts = []
            for span in line:
                text = escape(span.text)
                parts.append(f"<strong>{text}</strong>" if span.bold else text)
            rendered.append("".join(parts))
        return "<br/>".join(rendered)

    def to_plain_text(self) -> str:
        return "\n".join("".join(span.text for span in line) for line in self.lines)


# =============================================================================
# Passes
# =============================================================================

def substitute_currency(
    text: str,
    progress: FreeDeliveryProgress,
    currency: str = "USD",
    money_format: Optional[str] = None,
) -> str:
    """Replace {threshold}, {remaining} and {cart_total}."""
    if not any(p in text for p in CURRENCY_PLACEHOLDERS):
        return text
    values = {
        "{threshold}": format_money(progress.threshold, currency, money_format),
        "{remaining}": format_money(progress.remaining, currency, money_format),
        "{cart_total}": format_money(progress.cart_total, currency, money_format),
    }
    for placeholder, value in values.items():
        text = text.replace(placeholder, value)
    return text


def has_date_placeholder(text: str) -> bool:
    return any(p in text for p in DATE_PLACEHOLDERS)


def countdown_text(schedule: ComputedSchedule) -> str:
    """Countdown snapshot from the schedule's cutoff, "" when not shipping today."""
    if schedule.cutoff_at is None:
        return ""
    if schedule.cutoff_remaining is not None:
        return format_remaining(schedule.cutoff_remaining)
    # Hand-built schedules carry no zone; wall-clock difference
    return format_remaining(schedule.cutoff_at - schedule.local_now)


def substitute_dates(
    text: str,
    get_schedule: Callable[[], ComputedSchedule],
    countdown: Optional[str] = None,
) -> str:
    """
    Replace {arrival}, {express} and {countdown}.

    ``get_schedule`` is only called when the text needs it: {arrival} or
    {express} is present, or {countdown} is present without a
    caller-supplied value.
    """
    if not has_date_placeholder(text):
        return text

    needs_schedule = "{arrival}" in text or "{express}" in text
    if "{countdown}" in text and countdown is None:
        needs_schedule = True

    schedule = get_schedule() if needs_schedule else None
    if schedule is not None:
        text = text.replace(
            "{arrival}",
            format_delivery_window(schedule.delivery_date_min, schedule.delivery_date_max),
        )
        text = text.replace("{express}", format_express_date(schedule.express_date))
    if "{countdown}" in text:
        value = countdown if countdown is not None else countdown_text(schedule)
        text = text.replace("{countdown}", value)
    return text


def split_lines(text: str) -> list[str]:
    return text.split(LINE_BREAK)


def parse_bold(line: str) -> list[Span]:
    """
    Split a line into plain and bold spans.

    Markers pair left to right; an unmatched ``**`` stays literal.
    """
    spans: list[Span] = []
    position = 0
    for match in _BOLD.finditer(line):
        if match.start() > position:
            spans.append(Span(line[position:match.start()]))
        spans.append(Span(match.group(1), bold=True))
        position = match.end()
    if position < len(line):
        spans.append(Span(line[position:]))
    return spans


# =============================================================================
# Renderer
# =============================================================================

class _LazySchedule:
    """Computes the schedule on first use and reuses it after."""

    def __init__(self, compute: Callable[[], ComputedSchedule]) -> None:
        self._compute = compute
        self._schedule: Optional[ComputedSchedule] = None

    @property
    def computed(self) -> bool:
        return self._schedule is not None

    def __call__(self) -> ComputedSchedule:
        if self._schedule is None:
            self._schedule = self._compute()
        return self._schedule


@dataclass
class TemplateRenderer:
    """
    Renders message templates for one shop and rule.

    Usage:
        renderer = TemplateRenderer(settings, rule)
        message = renderer.render("Order in {countdown}{lb}Arrives **{arrival}**")
        message.to_html()
    """
    settings: GlobalSettings
    rule: Optional[Rule] = None
    engine: ScheduleEngine = field(default_factory=ScheduleEngine)

    def render(
        self,
        template: Optional[str],
        now: Optional[datetime] = None,
        countdown: Optional[str] = None,
        progress: Optional[FreeDeliveryProgress] = None,
        schedule: Optional[ComputedSchedule] = None,
    ) -> RenderedMessage:
        """
        Render a single template.

        Args:
            template: Merchant template; None or "" renders as empty
            now: Evaluation instant for the schedule
            countdown: Live countdown value supplied by the caller
            progress: Cart state for currency placeholders; defaults to an
                empty cart against the shop threshold
            schedule: Precomputed schedule to use instead of computing one
        """
        return self.render_many([template or ""], now, countdown, progress, schedule)[0]

    def render_many(
        self,
        templates: Sequence[str],
        now: Optional[datetime] = None,
        countdown: Optional[str] = None,
        progress: Optional[FreeDeliveryProgress] = None,
        schedule: Optional[ComputedSchedule] = None,
    ) -> list[RenderedMessage]:
        """Render several templates against one schedule computation."""
        if progress is None:
            progress = FreeDeliveryProgress.from_cart(self.settings.fd_threshold, 0)
        if schedule is not None:
            get_schedule = _LazySchedule(lambda: schedule)
        else:
            get_schedule = _LazySchedule(lambda: self.engine.compute(self.settings, self.rule, now=now))

        messages = []
        for template in templates:
            text = substitute_currency(
                template or "",
                progress,
                self.settings.currency,
                self.settings.money_format,
            )
            text = substitute_dates(text, get_schedule, countdown)
            lines = [parse_bold(line) for line in split_lines(text)]
            messages.append(RenderedMessage(lines=lines))
        return messages

    def render_rule_messages(
        self,
        now: Optional[datetime] = None,
        countdown: Optional[str] = None,
        progress: Optional[FreeDeliveryProgress] = None,
        schedule: Optional[ComputedSchedule] = None,
    ) -> list[RenderedMessage]:
        """Render the rule's message lines, skipping blank ones."""
        if self.rule is None:
            return []
        return self.render_many(self.rule.message_templates, now, countdown, progress, schedule)

"""
DeliveryPilot Rule Matcher

Selects the rule that applies to a product.

A rule matches when the product handle is in its handle list or any product
tag is in its tag list. Rules are tried in configuration order; fallback
rules are only considered once no regular rule matched, so a fallback listed
first does not shadow a more specific rule further down.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..exceptions import RuleNotFoundError
from ..logging_config import get_logger
from ..models import Rule

logger = get_logger("engine.rules")


def rule_matches(rule: Rule, handle: Optional[str], tags: Iterable[str] = ()) -> bool:
    """True when the rule's handles or tags select the product."""
    match = rule.match
    if handle and handle in match.product_handles:
        return True
    if match.tags:
        product_tags = {t.strip() for t in tags if t and t.strip()}
        return any(tag in product_tags for tag in match.tags)
    return False


@dataclass
class RuleMatcher:
    """
    Finds the rule for a product.

    Usage:
        matcher = RuleMatcher(rules)
        rule = matcher.find("linen-shirt", ["summer", "apparel"])
    """
    rules: Sequence[Rule]

    def find(self, handle: Optional[str], tags: Iterable[str] = ()) -> Optional[Rule]:
        """
        First regular rule matching the product, else the first fallback rule.

        Returns:
            The rule, or None when nothing applies
        """
        tags = list(tags)
        for rule in self.rules:
            if not rule.is_fallback and rule_matches(rule, handle, tags):
                logger.debug("Product %r matched rule %s", handle, rule.id, extra={"rule_id": rule.id})
                return rule

        for rule in self.rules:
            if rule.is_fallback:
                logger.debug("Product %r using fallback rule %s", handle, rule.id, extra={"rule_id": rule.id})
                return rule

        return None

    def require(self, handle: Optional[str], tags: Iterable[str] = ()) -> Rule:
        """Like ``find`` but raises RuleNotFoundError when nothing applies."""
        tags = list(tags)
        rule = self.find(handle, tags)
        if rule is None:
            raise RuleNotFoundError(
                message=f"No rule applies to product {handle!r}",
                details={"handle": handle, "tags": list(tags)},
            )
        return rule

    def get(self, rule_id: str) -> Rule:
        """Look up a rule by id."""
        for rule in self.rules:
            if rule.id == rule_id:
                return rule
        raise RuleNotFoundError(
            message=f"Rule not found: {rule_id}",
            details={"rule_id": rule_id},
        )


def find_matching_rule(
    rules: Sequence[Rule],
    handle: Optional[str],
    tags: Iterable[str] = (),
) -> Optional[Rule]:
    """Convenience wrapper around ``RuleMatcher(rules).find``."""
    return RuleMatcher(rules).find(handle, tags)

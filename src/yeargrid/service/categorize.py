# SPDX-License-Identifier: MIT

import logging
from typing import Any, Optional

from yeargrid.color import is_valid_color
from yeargrid.model.category import CategoryMatch, CategoryRule, MatchMode
from yeargrid.template.category import (
    UNCATEGORIZED_ID,
    get_default_categories_template,
    get_uncategorized_template,
)

logger = logging.getLogger(__name__)


def normalize_keywords(keywords: list[str]) -> list[str]:
    """
    Trim keywords, drop blank ones and remove case-insensitive duplicates.

    The first-seen casing of a duplicated keyword is kept.
    """
    cleaned: list[str] = []
    seen: set[str] = set()
    for keyword in keywords:
        trimmed = str(keyword).strip()
        if not trimmed:
            continue
        folded = trimmed.casefold()
        if folded in seen:
            continue
        seen.add(folded)
        cleaned.append(trimmed)
    return cleaned


def normalize_match_mode(match_mode: Optional[str]) -> str:
    return MatchMode.ALL if match_mode == MatchMode.ALL else MatchMode.ANY


def normalize_rule(raw_rule: dict[str, Any]) -> Optional[CategoryRule]:
    """
    Build a clean CategoryRule from loosely shaped input.

    Rules without an id or label, or with a color that is not '#RRGGBB',
    are rejected. A rule with no keywords is kept; it simply never matches.
    """
    rule_id = raw_rule.get("id")
    if not isinstance(rule_id, str) or not rule_id:
        return None
    label = str(raw_rule.get("label") or "").strip()
    color = raw_rule.get("color")
    if not label or not is_valid_color(color):
        return None
    keywords = raw_rule.get("keywords")
    return {
        "id": rule_id,
        "label": label,
        "color": str(color),
        "keywords": normalize_keywords(keywords if isinstance(keywords, list) else []),
        "match_mode": normalize_match_mode(
            raw_rule.get("match_mode", raw_rule.get("matchMode"))
        ),
        "is_default": bool(raw_rule.get("is_default", False)),
    }


def normalize_rules(raw_rules: list[dict[str, Any]]) -> list[CategoryRule]:
    """Normalize a list of rules, dropping invalid ones and duplicate labels (first wins)."""
    rules: list[CategoryRule] = []
    seen_labels: set[str] = set()
    for raw_rule in raw_rules:
        if not isinstance(raw_rule, dict):
            continue
        rule = normalize_rule(raw_rule)
        if rule is None:
            logger.debug("dropping invalid category rule: %r", raw_rule)
            continue
        folded_label = rule["label"].casefold()
        if folded_label in seen_labels:
            logger.debug("dropping duplicate category label: %s", rule["label"])
            continue
        seen_labels.add(folded_label)
        rules.append(rule)
    return rules


def order_rules(
    rules: list[CategoryRule], priority: Optional[list[str]] = None
) -> list[CategoryRule]:
    """
    Order rules for matching and z-order.

    Without a priority list rules sort by label, case-insensitively. With one,
    the listed ids come first in list order and any others follow by label.
    The same ordering decides which category wins a title and which color is
    drawn on top, so it is computed once and passed to every entry point.
    """
    by_label = sorted(rules, key=lambda rule: rule["label"].casefold())
    if priority is None:
        return by_label
    rank = {category_id: index for index, category_id in enumerate(priority)}
    return sorted(by_label, key=lambda rule: rank.get(rule["id"], len(rank)))


def get_default_rules() -> list[CategoryRule]:
    return order_rules(get_default_categories_template())


def category_priority(rules: list[CategoryRule]) -> dict[str, int]:
    """Map category id to render priority; uncategorized always comes last."""
    priority = {
        rule["id"]: index
        for index, rule in enumerate(rules)
        if rule["id"] != UNCATEGORIZED_ID
    }
    priority[UNCATEGORIZED_ID] = len(priority)
    return priority


def with_uncategorized(rules: list[CategoryRule]) -> list[CategoryRule]:
    """Rules followed by the uncategorized fallback, unless a rule already uses its id."""
    if any(rule["id"] == UNCATEGORIZED_ID for rule in rules):
        return list(rules)
    return [*rules, get_uncategorized_template()]


def get_category_rule(category_id: str, rules: list[CategoryRule]) -> CategoryRule:
    for rule in rules:
        if rule["id"] == category_id:
            return rule
    return get_uncategorized_template()


def _matches_keywords(folded_text: str, keywords: list[str], match_mode: str) -> bool:
    if len(keywords) == 0:
        return False
    if match_mode == MatchMode.ALL:
        return all(keyword.casefold() in folded_text for keyword in keywords)
    return any(keyword.casefold() in folded_text for keyword in keywords)


def _first_match(text: str, rules: list[CategoryRule]) -> Optional[CategoryRule]:
    folded_text = text.casefold()
    for rule in rules:
        if _matches_keywords(folded_text, rule["keywords"], rule["match_mode"]):
            return rule
    return None


def classify(
    title: str,
    rules: Optional[list[CategoryRule]] = None,
    description: Optional[str] = None,
    match_description: bool = False,
) -> CategoryMatch:
    """
    Classify an event title into a category.

    Rules are evaluated in the order given (the default categories, ordered
    by label, when rules is None) and the first match wins. If nothing
    matches the title and match_description is set, the description is
    tried with the same ordering. Falls back to the uncategorized category.
    """
    if rules is None:
        rules = get_default_rules()

    rule = _first_match(title, rules)
    if rule is None and match_description and description and description.strip():
        rule = _first_match(description, rules)

    if rule is None:
        uncategorized = get_uncategorized_template()
        return {"category": uncategorized["id"], "color": uncategorized["color"]}
    return {"category": rule["id"], "color": rule["color"]}

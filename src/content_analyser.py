# src/content_analyser.py
import logging

from rules import (
    CONTENT_RULES, CONTENT_TIERS, CONTENT_RECOMMENDATIONS, CONTENT_PLACEHOLDER,
    compile_rules, tier_for, add_audit,
)

logger = logging.getLogger(__name__)

_CONTENT_RULES = compile_rules(CONTENT_RULES)

CONTENT_TYPES = ("email", "sms", "chat")


def analyze_content(text: str) -> dict:
    """
    Score free-form message text (email, SMS, chat).

    Each rule contributes its weight once, however many times it matches;
    for links the number of matches is reported in `link_count`.
    """
    findings = []
    audit = []
    indicators = {rule["id"]: False for rule in _CONTENT_RULES}
    link_count = 0

    for rule in _CONTENT_RULES:
        matches = rule["regex"].findall(text)
        if not matches:
            continue
        if rule["id"] == "links":
            link_count = len(matches)
        reason = rule["reason"].format(count=len(matches))
        indicators[rule["id"]] = True
        findings.append(reason)
        add_audit(audit, rule["id"], rule["points"], reason)

    score = sum(a["points"] for a in audit)
    risk_level = tier_for(score, CONTENT_TIERS)
    logger.debug("content scored %d (%s), %d rule(s) matched", score, risk_level, len(audit))

    return {
        "content": text,
        "score": score,
        "risk_level": risk_level,
        "indicators": indicators,
        "link_count": link_count,
        "findings": findings or [CONTENT_PLACEHOLDER],
        "audit": audit,
        "recommendation": CONTENT_RECOMMENDATIONS[risk_level],
    }

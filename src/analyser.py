# src/analyser.py
import logging
import re
from urllib.parse import urlparse

import tldextract

from rules import (
    URL_RULES, URL_TIERS, URL_RECOMMENDATIONS, URL_PLACEHOLDER,
    compile_rules, tier_for, add_audit,
)

logger = logging.getLogger(__name__)

_URL_RULES = compile_rules(URL_RULES)

# offline extractor: bundled public suffix snapshot, no cache writes
_extract = tldextract.TLDExtract(cache_dir=None, suffix_list_urls=())

# ---------------------------------------------------------------------
# Utilities: normalize/parse (display only, never scored)
# ---------------------------------------------------------------------
def normalize_url(url: str) -> str:
    if not url:
        return ""
    url = url.strip()
    if not re.match(r"^https?://", url, re.I):
        url = "http://" + url
    return url

def get_domain_from_url(url):
    """
    Returns (hostname, registered_domain), or (None, None) when no host
    can be parsed out of the input.
    """
    nurl = normalize_url(url)
    if not nurl:
        return None, None
    try:
        hostname = urlparse(nurl).hostname
    except ValueError:
        return None, None
    if not hostname:
        return None, None
    hostname = hostname.lower()
    ext = _extract(hostname)
    if ext.suffix:
        registered = ext.domain + "." + ext.suffix
    else:
        registered = ext.domain or hostname
    return hostname, registered

# ---------------------------------------------------------------------
# Main analyze
# ---------------------------------------------------------------------
def analyze_url(url: str) -> dict:
    """
    Score a URL against the fixed rule table.

    Every rule is evaluated and the weights of the ones that match are summed,
    without a ceiling. The result is a fresh dict: the echoed url, the
    registered domain (informational), score, status, the ordered indicator
    messages, the audit trail and a recommendation for the status.
    """
    indicators = []
    audit = []

    for rule in _URL_RULES:
        if rule["regex"].search(url):
            indicators.append(rule["reason"])
            add_audit(audit, rule["id"], rule["points"], rule["reason"])

    score = sum(a["points"] for a in audit)
    status = tier_for(score, URL_TIERS)
    logger.debug("url scored %d (%s), %d rule(s) matched", score, status, len(audit))

    _, registered = get_domain_from_url(url)

    return {
        "url": url,
        "domain": registered,
        "score": score,
        "status": status,
        "indicators": indicators or [URL_PLACEHOLDER],
        "audit": audit,
        "recommendation": URL_RECOMMENDATIONS[status],
    }

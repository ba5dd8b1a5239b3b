# src/mock_details.py
# Illustrative fields shown next to a URL scan. Nothing here is measured:
# no WHOIS, no redirect following, no reputation lookup.
import random

REPUTATION_BY_STATUS = {
    "safe": "Trusted",
    "suspicious": "Unknown",
    "dangerous": "Flagged",
}


def build_url_details(result, rng=None):
    """Placeholder details for a result returned by analyser.analyze_url."""
    rng = rng or random
    status = result["status"]
    return {
        "domain_age": "2+ years" if status == "safe" else "< 30 days",
        "ssl": result["url"].startswith("https://"),
        "redirects": rng.randint(0, 2),
        "reputation": REPUTATION_BY_STATUS[status],
        "simulated": True,
    }

# src/rules.py
import re

# ---------------------------------------------------------------------
# URL rules (all evaluated, weights are additive)
# ---------------------------------------------------------------------
URL_RULES = [
    {
        "id": "at_symbol",
        "pattern": r"@",
        "flags": 0,
        "points": 25,
        "reason": "Contains @ symbol (potential redirect)",
    },
    {
        "id": "ip_address",
        "pattern": r"\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}",
        "flags": 0,
        "points": 30,
        "reason": "IP address instead of domain",
    },
    {
        "id": "suspicious_keyword",
        "pattern": r"login|verify|secure",
        "flags": re.IGNORECASE,
        "points": 15,
        "reason": "Suspicious keywords detected",
    },
    {
        "id": "long_url",
        "pattern": r"\A.{76}",
        "flags": re.DOTALL,
        "points": 10,
        "reason": "Unusually long URL",
    },
    {
        "id": "no_https",
        "pattern": r"\A(?!https://)",
        "flags": 0,
        "points": 20,
        "reason": "Not using HTTPS",
    },
    {
        "id": "unicode_chars",
        "pattern": r"[^\x00-\x7F]",
        "flags": 0,
        "points": 35,
        "reason": "Contains unicode characters (possible homograph attack)",
    },
]

URL_TIERS = [(50, "dangerous"), (25, "suspicious"), (0, "safe")]

URL_RECOMMENDATIONS = {
    "dangerous": "Do not visit this URL. It shows multiple hallmarks of a phishing site.",
    "suspicious": "Proceed with caution. Verify the destination through an official channel "
                  "before entering any information.",
    "safe": "No immediate threats detected, but always double-check the domain before signing in.",
}

URL_PLACEHOLDER = "No immediate threats detected"

# ---------------------------------------------------------------------
# Content rules (email / sms / chat)
# ---------------------------------------------------------------------
BRANDS = [
    "PayPal", "Amazon", "Microsoft", "Apple", "Google", "Facebook", "Netflix", "Bank of America",
]

CONTENT_RULES = [
    {
        "id": "urgency",
        "pattern": r"urgent|immediately|act now|expire|suspend|verify now|limited time",
        "flags": re.IGNORECASE,
        "points": 20,
        "reason": "Uses urgency tactics to pressure quick action",
    },
    {
        "id": "personal_info",
        "pattern": r"password|credit card|ssn|social security|bank account|pin|verify your account",
        "flags": re.IGNORECASE,
        "points": 30,
        "reason": "Requests sensitive personal or financial information",
    },
    {
        # flat weight; {count} is filled with the number of links found
        "id": "links",
        "pattern": r"https?://\S+",
        "flags": re.IGNORECASE,
        "points": 15,
        "reason": "Contains {count} link(s) - verify destination before clicking",
    },
    {
        "id": "spoofing",
        "pattern": "|".join(re.escape(b) for b in BRANDS),
        "flags": re.IGNORECASE,
        "points": 25,
        "reason": "References well-known brand - verify sender authenticity",
    },
    {
        # the phrase check ignores case, the formatting markers do not
        "id": "grammar",
        "pattern": r"(?i:\b(?:your|you're)\s+(?:account|information)\s+(?:has|have|is)\s+been\b)"
                   r"|\.\.\.|!!!|URGENT",
        "flags": 0,
        "points": 10,
        "reason": "Contains grammatical inconsistencies or unusual formatting",
    },
]

CONTENT_TIERS = [(60, "high"), (30, "medium"), (0, "low")]

CONTENT_RECOMMENDATIONS = {
    "high": "DO NOT respond or click any links. This appears to be a phishing attempt. "
            "Report and delete immediately.",
    "medium": "Exercise extreme caution. Verify sender through official channels before taking any action.",
    "low": "Content appears relatively safe, but always verify sender identity and be cautious with links.",
}

CONTENT_PLACEHOLDER = "No obvious phishing indicators detected in initial scan"


def compile_rules(rules):
    """Return a copy of each rule with its pattern compiled under `regex`."""
    compiled = []
    for rule in rules:
        r = dict(rule)
        r["regex"] = re.compile(rule["pattern"], rule["flags"])
        compiled.append(r)
    return compiled


def tier_for(score, tiers):
    for threshold, name in tiers:
        if score >= threshold:
            return name
    return tiers[-1][1]


def add_audit(audit_list, rule_name, points, reason):
    audit_list.append({"rule": rule_name, "points": int(points), "reason": reason})

# src/threat_feed.py
import logging
import random
import string
import threading
from collections import deque
from datetime import datetime, timezone

logger = logging.getLogger(__name__)

EVENT_TYPES = ["email", "sms", "web", "social"]
SEVERITIES = ["low", "medium", "high", "critical"]

DESCRIPTIONS = [
    "Credential harvesting attempt detected",
    "Malicious link redirecting to fake login page",
    "Brand impersonation - PayPal phishing",
    "Social engineering attempt via urgent message",
    "Suspicious attachment with potential malware",
    "Domain spoofing detected in email header",
    "Homoglyph attack using unicode characters",
    "Zero-day phishing campaign identified",
]

SOURCES = [
    "unknown-sender@suspicious-domain.xyz",
    "192.168.1.42",
    "https://paypa1-secure.net",
    "no-reply@amaz0n-verify.com",
    "+1-555-0123",
    "https://microsoft-account.tk",
]

_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_threat_event(rng=None, now=None):
    """
    Fabricate one feed event. Every field is random; the event is tagged
    `simulated` so it is never confused with a detection.
    """
    rng = rng or random
    now = now or datetime.now(timezone.utc)
    return {
        "id": "".join(rng.choice(_ID_ALPHABET) for _ in range(9)),
        "timestamp": now.isoformat(),
        "type": rng.choice(EVENT_TYPES),
        "severity": rng.choice(SEVERITIES),
        "source": rng.choice(SOURCES),
        "description": rng.choice(DESCRIPTIONS),
        "blocked": rng.random() > 0.1,
        "simulated": True,
    }


class ThreatFeed:
    """Bounded newest-first buffer of synthetic events, safe to share between request threads."""

    def __init__(self, max_events=50, initial_events=10, rng=None):
        if max_events < 1:
            raise ValueError("max_events must be at least 1")
        self.max_events = max_events
        self._rng = rng or random.Random()
        self._lock = threading.Lock()
        self._events = deque(maxlen=max_events)

        initial = [generate_threat_event(self._rng) for _ in range(initial_events)]
        initial.sort(key=lambda e: e["timestamp"], reverse=True)
        # deque keeps the left end; extend in order so the newest stays first
        for event in initial[:max_events]:
            self._events.append(event)

    def push(self):
        with self._lock:
            event = generate_threat_event(self._rng)
            self._events.appendleft(event)
        logger.debug("feed event %s (%s)", event["id"], event["severity"])
        return event

    def events(self):
        with self._lock:
            return list(self._events)

    def stats(self):
        events = self.events()
        by_severity = {s: 0 for s in SEVERITIES}
        for e in events:
            by_severity[e["severity"]] += 1
        return {
            "total": len(events),
            "blocked": sum(1 for e in events if e["blocked"]),
            "by_severity": by_severity,
        }

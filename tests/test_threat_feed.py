import random
import string
from datetime import datetime, timezone

import pytest

from threat_feed import ThreatFeed, generate_threat_event, EVENT_TYPES, SEVERITIES, SOURCES, DESCRIPTIONS

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def test_event_fields():
    event = generate_threat_event(random.Random(3), now=NOW)
    assert len(event["id"]) == 9
    assert set(event["id"]) <= set(string.ascii_lowercase + string.digits)
    assert event["timestamp"] == "2024-05-01T12:00:00+00:00"
    assert event["type"] in EVENT_TYPES
    assert event["severity"] in SEVERITIES
    assert event["source"] in SOURCES
    assert event["description"] in DESCRIPTIONS
    assert isinstance(event["blocked"], bool)
    assert event["simulated"] is True


def test_seeded_events_repeat():
    assert generate_threat_event(random.Random(7), now=NOW) == generate_threat_event(random.Random(7), now=NOW)


def test_initial_events():
    feed = ThreatFeed(max_events=5, initial_events=3, rng=random.Random(1))
    assert len(feed.events()) == 3


def test_push_prepends_and_caps():
    feed = ThreatFeed(max_events=5, initial_events=3, rng=random.Random(1))
    pushed = [feed.push() for _ in range(4)]
    events = feed.events()
    assert len(events) == 5
    assert events[0] == pushed[-1]
    assert events[:4] == list(reversed(pushed))


def test_initial_larger_than_capacity():
    feed = ThreatFeed(max_events=2, initial_events=10, rng=random.Random(1))
    assert len(feed.events()) == 2


def test_stats_add_up():
    feed = ThreatFeed(max_events=20, initial_events=15, rng=random.Random(5))
    stats = feed.stats()
    events = feed.events()
    assert stats["total"] == 15
    assert sum(stats["by_severity"].values()) == 15
    assert stats["blocked"] == sum(1 for e in events if e["blocked"])


def test_snapshot_is_a_copy():
    feed = ThreatFeed(max_events=5, initial_events=2, rng=random.Random(1))
    feed.events().clear()
    assert len(feed.events()) == 2


def test_zero_capacity_rejected():
    with pytest.raises(ValueError):
        ThreatFeed(max_events=0)

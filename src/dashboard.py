# src/dashboard.py
# Canned metrics for the dashboard view. Static demo figures, not aggregated
# from any scan.
import copy

SUMMARY = {
    "total_threats": {"value": 371, "change": "+12%", "note": "from last 24h"},
    "blocked": {"value": 345, "note": "93% success rate"},
    "flagged": {"value": 26, "note": "Awaiting manual review"},
    "detection_rate": {"value": "98.7%", "change": "+2.1%", "note": "improvement"},
}

THREAT_ACTIVITY = [
    {"time": "00:00", "threats": 45, "blocked": 42, "flagged": 3},
    {"time": "04:00", "threats": 32, "blocked": 30, "flagged": 2},
    {"time": "08:00", "threats": 78, "blocked": 71, "flagged": 7},
    {"time": "12:00", "threats": 95, "blocked": 88, "flagged": 7},
    {"time": "16:00", "threats": 67, "blocked": 63, "flagged": 4},
    {"time": "20:00", "threats": 54, "blocked": 51, "flagged": 3},
]

CATEGORIES = [
    {"name": "Credential Phishing", "value": 35},
    {"name": "Malware Distribution", "value": 25},
    {"name": "Brand Impersonation", "value": 20},
    {"name": "Social Engineering", "value": 15},
    {"name": "Other", "value": 5},
]

ATTACK_VECTORS = [
    {"vector": "Email", "count": 145},
    {"vector": "SMS", "count": 78},
    {"vector": "Messaging", "count": 52},
    {"vector": "Social Media", "count": 34},
    {"vector": "Web", "count": 62},
]


def get_dashboard():
    return copy.deepcopy({
        "summary": SUMMARY,
        "threat_activity": THREAT_ACTIVITY,
        "categories": CATEGORIES,
        "attack_vectors": ATTACK_VECTORS,
        "simulated": True,
    })

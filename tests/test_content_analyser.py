from content_analyser import analyze_content
from education import PHISHING_EXAMPLES

PLACEHOLDER = "No obvious phishing indicators detected in initial scan"


def test_empty_text_is_low():
    res = analyze_content("")
    assert res["score"] == 0
    assert res["risk_level"] == "low"
    assert res["findings"] == [PLACEHOLDER]
    assert res["link_count"] == 0
    assert not any(res["indicators"].values())


def test_urgent_password_request_is_high():
    res = analyze_content("URGENT: verify your account password now")
    assert res["score"] == 60
    assert res["risk_level"] == "high"
    assert res["indicators"] == {
        "urgency": True,
        "personal_info": True,
        "links": False,
        "spoofing": False,
        "grammar": True,
    }
    assert res["findings"] == [
        "Uses urgency tactics to pressure quick action",
        "Requests sensitive personal or financial information",
        "Contains grammatical inconsistencies or unusual formatting",
    ]
    assert res["recommendation"].startswith("DO NOT respond")


def test_all_five_rules_sum_to_100():
    text = "Urgent: your PayPal password is needed, visit https://paypa1.example/login now!!!"
    res = analyze_content(text)
    assert res["score"] == 100
    assert all(res["indicators"].values())
    assert [a["points"] for a in res["audit"]] == [20, 30, 15, 25, 10]


def test_link_weight_is_flat_and_count_reported():
    res = analyze_content("see http://a.example and https://b.example")
    assert res["score"] == 15
    assert res["link_count"] == 2
    assert res["findings"] == ["Contains 2 link(s) - verify destination before clicking"]


def test_lowercase_urgent_is_not_formatting_anomaly():
    res = analyze_content("this is urgent")
    assert res["score"] == 20
    assert res["indicators"]["grammar"] is False


def test_account_has_been_phrase():
    res = analyze_content("Your information has been updated.")
    assert res["indicators"]["grammar"] is True
    assert res["score"] == 10


def test_ellipsis_marks_formatting():
    assert analyze_content("wait for it...")["indicators"]["grammar"] is True


def test_keywords_match_inside_words():
    # "pin" inside "shopping"
    res = analyze_content("Thanks for shopping with us")
    assert res["indicators"]["personal_info"] is True
    assert res["risk_level"] == "medium"


def test_brand_plus_urgency_is_medium():
    res = analyze_content("Netflix: act now")
    assert res["score"] == 45
    assert res["risk_level"] == "medium"
    assert res["recommendation"].startswith("Exercise extreme caution")


def test_training_phishing_example_is_high():
    phish = [e for e in PHISHING_EXAMPLES if not e["safe"]][0]
    res = analyze_content(phish["message"])
    assert res["risk_level"] == "high"
    assert res["score"] == 100


def test_deterministic():
    text = "Your account has been suspended. Visit http://x.example immediately"
    assert analyze_content(text) == analyze_content(text)

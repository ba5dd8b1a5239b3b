# src/education.py
import copy

PHISHING_EXAMPLES = [
    {
        "title": "Urgent Account Verification",
        "message": (
            "From: security@paypa1-verify.com\n"
            "Subject: URGENT: Verify Your Account Now!\n\n"
            "Dear Valued Customer,\n\n"
            "Your PayPal account has been suspended due to suspicious activity. "
            "Click here immediately to verify your identity or your account will be "
            "permanently closed within 24 hours.\n\n"
            "Verify Now: http://paypa1-secure.tk/login"
        ),
        "indicators": [
            "Misspelled domain (paypa1 instead of paypal)",
            "Creates false urgency",
            "Threatens account closure",
            "Suspicious link with .tk TLD",
            "Generic greeting instead of your name",
        ],
        "safe": False,
    },
    {
        "title": "Legitimate Company Email",
        "message": (
            "From: notifications@amazon.com\n"
            "Subject: Your Order #123-4567890 Has Shipped\n\n"
            "Hi John Smith,\n\n"
            "Your order has been shipped and will arrive on Friday, Dec 15.\n\n"
            "View your order: amazon.com/orders\n\n"
            "Thank you for shopping with Amazon!"
        ),
        "indicators": [
            "Legitimate amazon.com domain",
            "Personalized greeting with your name",
            "No urgent action required",
            "Clean, professional URL",
            "Specific order information",
        ],
        "safe": True,
    },
]

RED_FLAGS = [
    {
        "title": "Suspicious Sender",
        "description": "Check for misspelled domains, generic email addresses, or mismatched sender information",
        "examples": ["paypa1@gmail.com", "noreply@secure-bank.tk", "admin@company.co.uk.net"],
    },
    {
        "title": "Malicious Links",
        "description": "Hover over links to preview the actual URL. Look for IP addresses, misspellings, "
                       "or unusual domains",
        "examples": ["http://192.168.1.1/login", "https://micr0soft.com", "bit.ly/abc123"],
    },
    {
        "title": "Urgency & Threats",
        "description": "Phishing emails create panic to bypass rational thinking",
        "examples": ["Act now or lose access!", "Verify within 24 hours", "Immediate action required"],
    },
    {
        "title": "Generic Greetings",
        "description": "Legitimate companies usually address you by name",
        "examples": ["Dear Customer", "Valued User", "Account Holder"],
    },
]

BEST_PRACTICES = [
    {
        "category": "Email Safety",
        "practices": [
            "Never click links in unexpected emails",
            "Verify sender email addresses carefully",
            "Enable two-factor authentication (2FA)",
            "Use unique passwords for each account",
            "Report suspicious emails to IT security",
        ],
    },
    {
        "category": "URL Verification",
        "practices": [
            "Manually type important URLs instead of clicking links",
            "Check for HTTPS and valid SSL certificates",
            "Look for misspellings in domain names",
            "Be cautious of shortened URLs (bit.ly, tinyurl)",
            "Verify the actual domain, not just the display text",
        ],
    },
    {
        "category": "Information Protection",
        "practices": [
            "Never share passwords via email or chat",
            "Legitimate companies won't ask for sensitive info via email",
            "Use password managers for secure storage",
            "Regularly update security software",
            "Be suspicious of unexpected attachments",
        ],
    },
]


def get_training_material():
    return copy.deepcopy({
        "examples": PHISHING_EXAMPLES,
        "red_flags": RED_FLAGS,
        "best_practices": BEST_PRACTICES,
    })

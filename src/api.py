# src/api.py
import logging

from flask import Flask, request, jsonify
from flask_cors import CORS

from analyser import analyze_url
from config import load_settings
from content_analyser import analyze_content, CONTENT_TYPES
from dashboard import get_dashboard
from education import get_training_material
from mock_details import build_url_details
from threat_feed import ThreatFeed

logger = logging.getLogger(__name__)


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}

def _require_text(data, key):
    """Return (value, None), or (None, error) when the field is missing or blank."""
    value = data.get(key)
    if not isinstance(value, str):
        return None, f"missing {key}"
    if not value.strip():
        return None, f"empty {key}"
    return value, None


def create_app(settings=None, feed=None):
    settings = settings or load_settings()

    app = Flask(__name__)
    app.config["PHISHGUARD"] = settings
    CORS(app, origins=settings["cors_origins"])

    if feed is None:
        feed = ThreatFeed(max_events=settings["feed_max_events"],
                          initial_events=settings["feed_initial_events"])
    app.extensions["threat_feed"] = feed

    @app.route("/analyze/url", methods=["POST"])
    def analyze_url_route():
        url, err = _require_text(_json_body(), "url")
        if err:
            logger.info("rejected url scan: %s", err)
            return jsonify({"error": err}), 400
        try:
            res = analyze_url(url)
            res["details"] = build_url_details(res)
            return jsonify(res)
        except Exception as e:
            logger.exception("url scan failed")
            return jsonify({"error": str(e)}), 500

    @app.route("/analyze/content", methods=["POST"])
    def analyze_content_route():
        data = _json_body()
        content, err = _require_text(data, "content")
        if err:
            logger.info("rejected content scan: %s", err)
            return jsonify({"error": err}), 400
        content_type = data.get("content_type") or "email"
        if content_type not in CONTENT_TYPES:
            return jsonify({"error": f"unknown content_type: {content_type}"}), 400
        try:
            res = analyze_content(content)
            res["content_type"] = content_type
            return jsonify(res)
        except Exception as e:
            logger.exception("content scan failed")
            return jsonify({"error": str(e)}), 500

    @app.route("/feed")
    def feed_snapshot():
        return jsonify({"events": feed.events(), "stats": feed.stats()})

    @app.route("/feed/events", methods=["POST"])
    def feed_push():
        return jsonify(feed.push()), 201

    @app.route("/dashboard")
    def dashboard():
        return jsonify(get_dashboard())

    @app.route("/education")
    def education():
        return jsonify(get_training_material())

    @app.route("/health")
    def health():
        return jsonify({"status": "ok"})

    return app


def main():
    settings = load_settings()
    logging.basicConfig(
        level=settings["log_level"],
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    app = create_app(settings)
    logger.info("PhishGuard API on %s:%s", settings["host"], settings["port"])
    app.run(host=settings["host"], port=settings["port"], debug=settings["debug"])


if __name__ == "__main__":
    main()

"""Flask monitoring dashboard for the syslog server."""

import os

from flask import Flask, jsonify, render_template, request

from router_syslog.metrics import Metrics
from router_syslog.reject_tracker import RejectTracker

_TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")


def create_dashboard_app(metrics: Metrics, reject_tracker: RejectTracker) -> Flask:
    app = Flask(__name__, template_folder=_TEMPLATE_DIR)

    @app.route("/")
    def index():
        return render_template("dashboard.html")

    @app.route("/stats")
    def stats():
        snap = metrics.snapshot()
        total = snap["total_received"]
        snap["reject_ratio"] = round(snap["rejected"] / total, 4) if total else 0.0
        snap["tracked_rejects"] = reject_tracker.count
        snap["recent_rejects"] = reject_tracker.get_recent(10)
        return jsonify(snap)

    @app.route("/rejects")
    def rejects():
        n = request.args.get("n", default=10, type=int)
        return jsonify(rejects=reject_tracker.get_recent(n), count=reject_tracker.count)

    @app.route("/health")
    def health():
        return jsonify(status="ok")

    return app


def run_dashboard(app: Flask, port: int):
    """Run the Flask app (intended for use in a daemon thread)."""
    app.run(host="0.0.0.0", port=port, use_reloader=False)

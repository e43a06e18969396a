from flask import current_app, jsonify

from dashboard.application.stats import dashboard_stats as compute_dashboard_stats
from dashboard.services import get_services
from dashboard.utils.decorators import login_required
from . import v1_bp


@v1_bp.route("/dashboard/stats", methods=["GET"])
@login_required
def dashboard_stats():
    stats = compute_dashboard_stats(
        get_services().documents,
        recent_days=current_app.config.get("RECENT_DAYS", 7),
    )
    return jsonify(stats), 200

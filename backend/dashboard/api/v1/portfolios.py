from dashboard.application.record_types import PORTFOLIO
from dashboard.utils.decorators import login_required
from .common import (
    create_view,
    delete_view,
    edit_form_view,
    list_view,
    new_form_view,
    update_view,
)
from . import v1_bp

LIST_ENDPOINT = "v1.list_portfolios"


@v1_bp.route("/portfolios", methods=["GET"])
@login_required
def list_portfolios():
    return list_view(PORTFOLIO)


@v1_bp.route("/portfolios/new", methods=["GET"])
@login_required
def new_portfolio_form():
    return new_form_view(PORTFOLIO)


@v1_bp.route("/portfolios/<record_id>", methods=["GET"])
@login_required
def edit_portfolio_form(record_id):
    return edit_form_view(PORTFOLIO, record_id)


@v1_bp.route("/portfolios", methods=["POST"])
@login_required
def create_portfolio():
    return create_view(PORTFOLIO, LIST_ENDPOINT)


@v1_bp.route("/portfolios/<record_id>", methods=["PUT"])
@login_required
def update_portfolio(record_id):
    return update_view(PORTFOLIO, record_id, LIST_ENDPOINT)


@v1_bp.route("/portfolios/<record_id>", methods=["DELETE"])
@login_required
def delete_portfolio(record_id):
    return delete_view(PORTFOLIO, record_id)

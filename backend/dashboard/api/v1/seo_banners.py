from dashboard.application.record_types import SEO_BANNER
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

LIST_ENDPOINT = "v1.list_seo_banners"


@v1_bp.route("/seo-banners", methods=["GET"])
@login_required
def list_seo_banners():
    return list_view(SEO_BANNER)


@v1_bp.route("/seo-banners/new", methods=["GET"])
@login_required
def new_seo_banner_form():
    return new_form_view(SEO_BANNER)


@v1_bp.route("/seo-banners/<record_id>", methods=["GET"])
@login_required
def edit_seo_banner_form(record_id):
    return edit_form_view(SEO_BANNER, record_id)


@v1_bp.route("/seo-banners", methods=["POST"])
@login_required
def create_seo_banner():
    return create_view(SEO_BANNER, LIST_ENDPOINT)


@v1_bp.route("/seo-banners/<record_id>", methods=["PUT"])
@login_required
def update_seo_banner(record_id):
    return update_view(SEO_BANNER, record_id, LIST_ENDPOINT)


@v1_bp.route("/seo-banners/<record_id>", methods=["DELETE"])
@login_required
def delete_seo_banner(record_id):
    return delete_view(SEO_BANNER, record_id)

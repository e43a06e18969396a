from dashboard.application.record_types import BLOG
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

LIST_ENDPOINT = "v1.list_blogs"


@v1_bp.route("/blogs", methods=["GET"])
@login_required
def list_blogs():
    return list_view(BLOG)


@v1_bp.route("/blogs/new", methods=["GET"])
@login_required
def new_blog_form():
    return new_form_view(BLOG)


@v1_bp.route("/blogs/<record_id>", methods=["GET"])
@login_required
def edit_blog_form(record_id):
    return edit_form_view(BLOG, record_id)


@v1_bp.route("/blogs", methods=["POST"])
@login_required
def create_blog():
    return create_view(BLOG, LIST_ENDPOINT)


@v1_bp.route("/blogs/<record_id>", methods=["PUT"])
@login_required
def update_blog(record_id):
    return update_view(BLOG, record_id, LIST_ENDPOINT)


@v1_bp.route("/blogs/<record_id>", methods=["DELETE"])
@login_required
def delete_blog(record_id):
    return delete_view(BLOG, record_id)

from flask import jsonify

from dashboard.application.get_record import get_record
from dashboard.application.record_types import CONTACT_SUBMISSION
from dashboard.domain.forms import ContactSubmission
from dashboard.services import get_services
from dashboard.utils.decorators import login_required
from .common import delete_view, list_view
from . import v1_bp


# Contact entries are submitted by the public site; the dashboard only reads and deletes them.

@v1_bp.route("/contact-submissions", methods=["GET"])
@login_required
def list_contact_submissions():
    return list_view(CONTACT_SUBMISSION)


@v1_bp.route("/contact-submissions/<record_id>", methods=["GET"])
@login_required
def view_contact_submission(record_id):
    record = get_record(
        documents=get_services().documents,
        record_type=CONTACT_SUBMISSION,
        record_id=record_id,
    )
    return jsonify({"item": ContactSubmission.from_record(record).to_document()}), 200


@v1_bp.route("/contact-submissions/<record_id>", methods=["DELETE"])
@login_required
def delete_contact_submission(record_id):
    return delete_view(CONTACT_SUBMISSION, record_id)

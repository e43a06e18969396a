# Helpers shared by the record list and form routes.
from flask import current_app, jsonify, request, session, url_for
from werkzeug.exceptions import BadRequest

from dashboard.application.create_record import create_record
from dashboard.application.delete_record import delete_record
from dashboard.application.get_record import get_form, new_form
from dashboard.application.list_records import list_records
from dashboard.application.update_record import update_record
from dashboard.services import get_services
from dashboard.utils.pagination import ListViewState

LIST_STATE_KEY = "list_state"


def load_list_state(record_type):
    saved = session.get(LIST_STATE_KEY, {}).get(record_type.collection)
    return ListViewState.from_dict(saved, current_app.config.get("DEFAULT_PAGE_SIZE", 10))


def save_list_state(record_type, state):
    states = dict(session.get(LIST_STATE_KEY, {}))
    states[record_type.collection] = state.to_dict()
    session[LIST_STATE_KEY] = states


def list_state_from_request(record_type):
    """
    Merge ``q``, ``per_page`` and ``page`` into the caller's saved list state.

    A new ``per_page`` always sends the caller back to page 0.
    """
    state = load_list_state(record_type)
    state.apply(
        query=request.args.get("q"),
        page_size=request.args.get("per_page", type=int),
        page=request.args.get("page", type=int),
    )
    save_list_state(record_type, state)
    return state


def submitted_payload():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise BadRequest("Request body must be a JSON object")
    return data


def list_view(record_type):
    state = list_state_from_request(record_type)
    return jsonify(list_records(
        documents=get_services().documents,
        record_type=record_type,
        state=state,
    )), 200


def new_form_view(record_type):
    form = new_form(record_type)
    return jsonify({"form": form.editing_state()}), 200


def edit_form_view(record_type, record_id):
    form = get_form(
        documents=get_services().documents,
        record_type=record_type,
        record_id=record_id,
    )
    return jsonify({"id": record_id, "form": form.editing_state()}), 200


def create_view(record_type, list_endpoint):
    record = create_record(
        documents=get_services().documents,
        record_type=record_type,
        payload=submitted_payload(),
    )
    return jsonify({
        "message": f"{record_type.label} created successfully",
        "item": record,
        "redirect": url_for(list_endpoint),
    }), 201


def update_view(record_type, record_id, list_endpoint):
    record = update_record(
        documents=get_services().documents,
        record_type=record_type,
        record_id=record_id,
        payload=submitted_payload(),
    )
    return jsonify({
        "message": f"{record_type.label} updated successfully",
        "item": record,
        "redirect": url_for(list_endpoint),
    }), 200


def delete_view(record_type, record_id):
    documents = get_services().documents
    remaining = delete_record(
        documents=documents,
        record_type=record_type,
        record_id=record_id,
    )
    response = list_records(
        documents=documents,
        record_type=record_type,
        state=load_list_state(record_type),
        records=remaining,
    )
    response["message"] = f"{record_type.label} deleted successfully"
    return jsonify(response), 200

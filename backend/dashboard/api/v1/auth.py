from flask import current_app, g, jsonify, url_for

from dashboard.domain.validation import validate_login, validate_registration
from dashboard.domain.validation.rules import INVALID_EMAIL, is_email
from dashboard.exceptions import ValidationFailed
from dashboard.services import get_services
from dashboard.utils.decorators import login_required
from .common import submitted_payload
from . import v1_bp


@v1_bp.route("/auth/login", methods=["GET"])
def login_required_notice():
    return jsonify({
        "error": "Authentication required",
        "message": "Please sign in to continue",
    }), 401


@v1_bp.route("/auth/login", methods=["POST"])
def login():
    data = submitted_payload()

    errors = validate_login(data)
    if errors:
        raise ValidationFailed(errors)

    session = get_services().auth.sign_in(str(data["email"]).strip(), str(data["password"]))

    return jsonify({
        "message": "Signed in",
        "user": session.user.to_dict(),
        "redirect": url_for("v1.dashboard_stats"),
    }), 200


@v1_bp.route("/auth/register", methods=["POST"])
def register():
    data = submitted_payload()

    errors = validate_registration(data)
    if errors:
        raise ValidationFailed(errors)

    first_name = str(data["firstName"]).strip()
    last_name = str(data["lastName"]).strip()
    user = get_services().auth.sign_up(
        str(data["email"]).strip(),
        str(data["password"]),
        {
            "first_name": first_name,
            "last_name": last_name,
            "full_name": f"{first_name} {last_name}",
        },
    )

    return jsonify({
        "message": "Registration successful! A confirmation email has been sent to your email address.",
        "user": user.to_dict(),
        "redirect": url_for("v1.login_required_notice"),
    }), 201


@v1_bp.route("/auth/logout", methods=["POST"])
def logout():
    get_services().auth.sign_out()
    return jsonify({
        "message": "Signed out",
        "redirect": url_for("v1.login_required_notice"),
    }), 200


@v1_bp.route("/auth/forgot-password", methods=["POST"])
def forgot_password():
    data = submitted_payload()
    email = str(data.get("email") or "").strip()

    if not email:
        raise ValidationFailed({"email": "Email is required"})
    if not is_email(email):
        raise ValidationFailed({"email": INVALID_EMAIL})

    site_url = current_app.config.get("SITE_URL", "").rstrip("/")
    get_services().auth.send_password_reset(email, f"{site_url}/authentication/reset-password")

    return jsonify({
        "message": "Password reset email sent! Please check your inbox."
    }), 200


@v1_bp.route("/auth/me", methods=["GET"])
@login_required
def current_user():
    return jsonify({"user": g.current_session.user.to_dict()}), 200

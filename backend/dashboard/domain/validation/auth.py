import re
from typing import Any, Mapping

from .rules import INVALID_EMAIL, ErrorMap, is_blank, is_email, require

PASSWORD_PATTERN = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)")


def _value(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def _name(errors: ErrorMap, path: str, value: str, label: str) -> None:
    if not require(errors, path, value, f"{label} is required"):
        return
    length = len(value.strip())
    if length < 2:
        errors[path] = "Too Short!"
    elif length > 50:
        errors[path] = "Too Long!"


def _email(errors: ErrorMap, value: str) -> None:
    if require(errors, "email", value, "Email is required") and not is_email(value):
        errors["email"] = INVALID_EMAIL


def validate_registration(data: Mapping[str, Any]) -> ErrorMap:
    errors: ErrorMap = {}
    _name(errors, "firstName", _value(data, "firstName"), "First name")
    _name(errors, "lastName", _value(data, "lastName"), "Last name")
    _email(errors, _value(data, "email"))

    password = _value(data, "password")
    if require(errors, "password", password, "Password is required"):
        if len(password) < 8:
            errors["password"] = "Password must be at least 8 characters"
        elif not PASSWORD_PATTERN.match(password):
            errors["password"] = (
                "Password must contain at least one uppercase letter, "
                "one lowercase letter, and one number"
            )

    confirm = _value(data, "confirmPassword")
    if is_blank(confirm):
        errors["confirmPassword"] = "Confirm password is required"
    elif confirm != password:
        errors["confirmPassword"] = "Passwords must match"

    if data.get("terms") is not True:
        errors["terms"] = "You must accept the terms and conditions"

    return errors


def validate_login(data: Mapping[str, Any]) -> ErrorMap:
    errors: ErrorMap = {}
    _email(errors, _value(data, "email"))
    if not _value(data, "password"):
        errors["password"] = "Password is required"
    return errors

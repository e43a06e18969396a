from functools import wraps
from flask import g, redirect, url_for

from dashboard.services import get_services

LOGIN_ENDPOINT = "v1.login_required_notice"


def _track_session(new_session):
    g.current_session = new_session


def login_required(fn):
    """
    Session Guard for a view.

    No session: redirect to the login route and never run the view.
    Otherwise subscribe to session changes for the rest of the request;
    the subscription is released in teardown.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        auth = get_services().auth
        current = auth.get_current_session()
        if current is None:
            return redirect(url_for(LOGIN_ENDPOINT))

        g.current_session = current
        g.session_subscription = auth.on_session_change(_track_session)
        return fn(*args, **kwargs)
    return wrapper


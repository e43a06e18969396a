from flask import g


def session_middleware(app):
    """
    Request lifecycle for the Session Guard.

    ``login_required`` acquires a session-change subscription for the
    guarded view; this teardown releases it once the request ends, error
    or not.
    """
    @app.before_request
    def reset_session_context():
        g.current_session = None
        g.session_subscription = None

    @app.teardown_request
    def release_session_subscription(exc):
        subscription = g.pop("session_subscription", None)
        if subscription is not None:
            subscription.unsubscribe()

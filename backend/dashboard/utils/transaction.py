from contextlib import contextmanager
from dashboard.extensions import db

@contextmanager
def transactional():
    """Commit the session on success, roll it back on any error."""
    try:
        yield db.session
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

from contextlib import contextmanager
from impact_api.extensions import db


@contextmanager
def transactional(session=None):
    """Commit on success, roll back and re-raise on any failure."""
    session = session or db.session
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise

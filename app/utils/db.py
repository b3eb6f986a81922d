from contextlib import contextmanager
import logging
from models import db

logger = logging.getLogger(__name__)


@contextmanager
def transactional(message="DB transaction failed"):
    """Commit on success, roll back and re-raise on any error."""
    try:
        yield db.session
        db.session.commit()
    except Exception as e:
        logger.error(f"{message}: %s", e, exc_info=True)
        db.session.rollback()
        raise


def delete_where(model, **filters) -> int:
    """Bulk delete every ``model`` row matching ``filters``; returns the row count."""
    return model.query.filter_by(**filters).delete(synchronize_session=False)


def scoped(model, mid, sid=None):
    """Query of ``model`` restricted to a merchant (and store), oldest first."""
    query = model.query.filter_by(mid=mid)
    if sid is not None:
        query = query.filter_by(sid=sid)
    return query.order_by(model.created_at)

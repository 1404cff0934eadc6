# impact_api/models/snapshot.py
import secrets
from sqlalchemy import event
from impact_api.extensions import db
from impact_api.utils.time import utcnow


def new_snapshot_id():
    return secrets.token_hex(12)


class Snapshot(db.Model):
    __tablename__ = "snapshots"

    id = db.Column(db.String(24), primary_key=True, default=new_snapshot_id)
    name = db.Column(db.String(255), nullable=False)
    trigger = db.Column(db.String(50), nullable=False, default="manual")
    slug = db.Column(db.String(200), nullable=False, index=True)
    data = db.Column(db.JSON, nullable=False, default=dict)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False, index=True)


@event.listens_for(Snapshot, "before_update")
def prevent_snapshot_mutation(mapper, connection, target):
    raise RuntimeError("Snapshots are immutable")

from impact_api.extensions import db
from .base import BaseModel


class MediaRecord(BaseModel):
    __tablename__ = "media"

    key = db.Column(db.String(512), nullable=False, index=True)
    url = db.Column(db.String(1024), nullable=False)
    content_type = db.Column(db.String(255), nullable=True)
    bytes = db.Column(db.BigInteger, nullable=True)
    width = db.Column(db.Integer, nullable=True)
    height = db.Column(db.Integer, nullable=True)
    duration = db.Column(db.Float, nullable=True)
    alt = db.Column(db.String(1024), nullable=True)
    tag = db.Column(db.String(255), nullable=True)
    entity_type = db.Column(db.String(100), nullable=True)
    entity_id = db.Column(db.String(255), nullable=True)

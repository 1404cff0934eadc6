from impact_api.extensions import db
from impact_api.utils.time import utcnow
from .base import BaseModel


class SectionDocument(BaseModel):
    """
    One stored document per (collection, slug).

    `collection` is the section's logical collection name ("hero",
    "impactLevels", ...); `content` holds the allow-listed payload.
    """
    __tablename__ = "section_documents"

    collection = db.Column(db.String(64), nullable=False, index=True)
    slug = db.Column(db.String(200), nullable=False, index=True)
    content = db.Column(db.JSON, nullable=False, default=dict)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)

    __table_args__ = (
        db.UniqueConstraint("collection", "slug", name="uq_section_collection_slug"),
    )

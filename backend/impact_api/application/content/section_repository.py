import copy
import logging
from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError

from impact_api.config import DEFAULT_SLUG
from impact_api.domain.sections import SectionType
from impact_api.extensions import db
from impact_api.models.section_document import SectionDocument
from impact_api.normalizers.section import normalize_section
from impact_api.utils.time import utcnow
from impact_api.utils.transaction import transactional

log = logging.getLogger(__name__)


def resolve_slug(slug: Optional[str]) -> str:
    return slug or DEFAULT_SLUG


class SectionRepository:
    """
    Find/upsert for one section type, keyed by slug.

    Writes are allow-listed at the top level: keys outside the section's
    allow-list are dropped, present keys replace the stored value
    wholesale (no deep merge), absent keys are left untouched.
    """

    def __init__(self, section_type: SectionType, session=None):
        self.section_type = section_type
        self.session = session or db.session

    @property
    def collection(self) -> str:
        return self.section_type.collection

    def _get(self, slug: str) -> Optional[SectionDocument]:
        return (
            self.session.query(SectionDocument)
            .filter_by(collection=self.collection, slug=slug)
            .one_or_none()
        )

    def find_by_slug(self, slug: Optional[str] = None) -> Optional[Dict[str, Any]]:
        document = self._get(resolve_slug(slug))
        if document is None:
            return None
        return normalize_section(document)

    def upsert_by_slug(self, slug: Optional[str], candidate: Dict[str, Any]) -> Dict[str, Any]:
        slug = resolve_slug(slug)
        sanitized = self.section_type.sanitize(candidate)

        dropped = sorted(set(candidate) - set(sanitized))
        if dropped:
            log.debug("[%s] dropping non-allow-listed keys: %s", self.collection, dropped)

        try:
            with transactional(self.session):
                self._apply(slug, sanitized)
        except IntegrityError:
            # Lost a first-insert race on (collection, slug); the row now
            # exists, so apply the same fields to it.
            log.info("[%s] concurrent insert for slug=%s, applying as update", self.collection, slug)
            with transactional(self.session):
                self._apply(slug, sanitized)

        saved = self._get(slug)
        return normalize_section(saved)

    def _apply(self, slug: str, sanitized: Dict[str, Any]) -> SectionDocument:
        document = self._get(slug)
        if document is None:
            document = SectionDocument()
            document.collection = self.collection
            document.slug = slug
            document.content = {}
            self.session.add(document)

        # Reassign so the JSON column registers the change.
        content = copy.deepcopy(document.content or {})
        content.update(copy.deepcopy(sanitized))
        document.content = content
        document.updated_at = utcnow()
        self.session.flush()
        return document

from .section_document import SectionDocument
from .media import MediaRecord
from .snapshot import Snapshot
from .user import User

__all__ = ["SectionDocument", "MediaRecord", "Snapshot", "User"]

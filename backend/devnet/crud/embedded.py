"""
Helpers for ordered lists of embedded entries (experience, education, likes, comments).

Every entry is a dict with its own ``id``. Lists are newest first, and a new
list is always returned so SQLAlchemy sees the column change.
"""
import uuid
from typing import Any, Dict, List, Optional

Entry = Dict[str, Any]


def new_entry_id() -> str:
    return str(uuid.uuid4())


def prepend(entries: Optional[List[Entry]], entry: Entry) -> List[Entry]:
    return [entry, *(entries or [])]


def find_by_id(entries: Optional[List[Entry]], entry_id: str) -> Optional[Entry]:
    for entry in entries or []:
        if entry.get("id") == entry_id:
            return entry
    return None


def find_by_user(entries: Optional[List[Entry]], user_id: str) -> Optional[Entry]:
    for entry in entries or []:
        if entry.get("user") == user_id:
            return entry
    return None


def without_id(entries: Optional[List[Entry]], entry_id: str) -> List[Entry]:
    return [entry for entry in entries or [] if entry.get("id") != entry_id]

# /app/client/references.py

"""
Identifier and reference normalization for API payloads.

Records may carry their identifier as `_id` or `id`, and a reference to
another record may arrive either as the raw identifier string or as the
populated sub-document. Both ambiguities are resolved here, once, so the
views never unwrap shapes by hand.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel


def entity_id(doc: Any) -> Optional[str]:
    """Returns the identifier of a record, preferring `_id` over `id`."""
    if not isinstance(doc, dict):
        return None
    value = doc.get("_id") or doc.get("id")
    return str(value) if value else None


def normalize_record(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Returns a copy of `doc` that always has an `id` key when it has an identifier."""
    record = dict(doc)
    identifier = entity_id(record)
    if identifier:
        record["id"] = identifier
    return record


class Ref(BaseModel):
    """
    A reference to another record: Unresolved (identifier only) or Resolved
    (identifier plus the populated entity).
    """
    id: Optional[str] = None
    entity: Optional[Dict[str, Any]] = None

    @property
    def resolved(self) -> bool:
        return self.entity is not None

    @classmethod
    def parse(cls, value: Any) -> "Ref":
        if isinstance(value, dict):
            return cls(id=entity_id(value), entity=normalize_record(value))
        if value:
            return cls(id=str(value))
        return cls()

    def get(self, key: str, default: Any = None) -> Any:
        """Reads a field of the populated entity; `default` when unresolved."""
        if self.entity is None:
            return default
        value = self.entity.get(key)
        return default if value in (None, "") else value

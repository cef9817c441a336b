"""Metadata of the values exported during one synthesis run.

Exports are keyed by resource type. Each item records the rendered export keys
and, when known before deployment, the literal exported values.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Optional


@dataclass
class ScopedMetaItem:
    name_ref: Optional[str] = None
    id_ref: Optional[str] = None
    arn_ref: Optional[str] = None
    name: Optional[str] = None
    id: Optional[str] = None
    arn: Optional[str] = None


@dataclass
class ScopedMeta:
    create_date_time: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    exports: Dict[str, ScopedMetaItem] = field(default_factory=dict)

    def get(self, resource_type: str) -> ScopedMetaItem:
        return self.exports.setdefault(resource_type, ScopedMetaItem())

    def set_name_ref(self, resource_type: str, value: str) -> "ScopedMeta":
        self.get(resource_type).name_ref = value
        return self

    def set_id_ref(self, resource_type: str, value: str) -> "ScopedMeta":
        self.get(resource_type).id_ref = value
        return self

    def set_arn_ref(self, resource_type: str, value: str) -> "ScopedMeta":
        self.get(resource_type).arn_ref = value
        return self

    def set_name(self, resource_type: str, value: str) -> "ScopedMeta":
        self.get(resource_type).name = value
        return self

    def set_id(self, resource_type: str, value: str) -> "ScopedMeta":
        self.get(resource_type).id = value
        return self

    def set_arn(self, resource_type: str, value: str) -> "ScopedMeta":
        self.get(resource_type).arn = value
        return self

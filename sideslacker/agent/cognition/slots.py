from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class Field(str, Enum):
    RECIPIENT = "recipient"
    REQUESTER = "requester"


# Fixed check order: recipient is always asked for before requester.
FIELD_ORDER: tuple[Field, ...] = (Field.RECIPIENT, Field.REQUESTER)

PLATFORM_SLOT_NAMES: dict[str, Field] = {
    "Employees": Field.RECIPIENT,
    "Visitor": Field.REQUESTER,
}


@dataclass(frozen=True)
class SlotValue:
    """A slot the extractor reported; ``value`` is None when it carried nothing."""

    name: str
    value: str | None = None

    @property
    def has_value(self) -> bool:
        return bool(self.value and self.value.strip())


@dataclass(frozen=True)
class TurnSlots:
    slots: Mapping[Field, SlotValue] = field(default_factory=dict)

    def is_present(self, slot_field: Field) -> bool:
        return slot_field in self.slots

    def value(self, slot_field: Field) -> str | None:
        slot = self.slots.get(slot_field)
        if slot is None or not slot.has_value:
            return None
        return str(slot.value).strip()

    def supplied(self) -> tuple[Field, ...]:
        return tuple(f for f in FIELD_ORDER if self.value(f) is not None)


def build_turn_slots(raw: Mapping[str, Any] | None) -> TurnSlots:
    """Map an extractor payload of ``{slot_name: value|None}`` onto fields.

    Platform slot names and canonical field names are both accepted; unknown
    names are ignored. A payload value may be a bare string or a
    ``{"name": ..., "value": ...}`` mapping.
    """
    slots: dict[Field, SlotValue] = {}
    for name, raw_value in dict(raw or {}).items():
        slot_field = resolve_slot_field(str(name))
        if slot_field is None:
            continue
        if isinstance(raw_value, Mapping):
            raw_value = raw_value.get("value")
        value = None if raw_value is None else str(raw_value)
        slots[slot_field] = SlotValue(name=str(name), value=value)
    return TurnSlots(slots=slots)


def resolve_slot_field(name: str) -> Field | None:
    mapped = PLATFORM_SLOT_NAMES.get(name)
    if mapped is not None:
        return mapped
    normalized = name.strip().lower()
    for candidate in Field:
        if candidate.value == normalized:
            return candidate
    return None

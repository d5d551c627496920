from __future__ import annotations

from dataclasses import dataclass, replace

from sideslacker.agent.cognition.slots import Field
from sideslacker.agent.session.store import SessionStore

_NOTIFIED_KEY = "notified"


@dataclass(frozen=True)
class SessionAttributes:
    recipient: str | None = None
    requester: str | None = None
    notified: bool = False

    def get(self, slot_field: Field) -> str | None:
        if slot_field is Field.RECIPIENT:
            return self.recipient
        return self.requester

    @property
    def is_complete(self) -> bool:
        return self.recipient is not None and self.requester is not None

    def with_field(self, slot_field: Field, value: str) -> SessionAttributes:
        if self.get(slot_field) == value:
            return self
        # A changed name makes this a different request.
        return replace(self, notified=False, **{slot_field.value: value})

    def mark_notified(self) -> SessionAttributes:
        return self if self.notified else replace(self, notified=True)


def load_attributes(store: SessionStore, session_id: str) -> SessionAttributes:
    return SessionAttributes(
        recipient=_as_name(store.get(session_id, Field.RECIPIENT.value)),
        requester=_as_name(store.get(session_id, Field.REQUESTER.value)),
        notified=bool(store.get(session_id, _NOTIFIED_KEY)),
    )


def commit_attributes(
    store: SessionStore,
    session_id: str,
    attributes: SessionAttributes,
    *,
    previous: SessionAttributes | None = None,
) -> None:
    """Write changed fields back; fields are overwritten, never removed."""
    for slot_field in Field:
        value = attributes.get(slot_field)
        if value is None:
            continue
        if previous is not None and previous.get(slot_field) == value:
            continue
        store.set(session_id, slot_field.value, value)
    if previous is None or previous.notified != attributes.notified:
        store.set(session_id, _NOTIFIED_KEY, attributes.notified)


def _as_name(value: object | None) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None

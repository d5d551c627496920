from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from sideslacker.agent.cognition.slots import FIELD_ORDER, Field, TurnSlots
from sideslacker.agent.session.attributes import SessionAttributes


@dataclass(frozen=True)
class NeedField:
    field: Field
    kind: Literal["need_field"] = "need_field"


@dataclass(frozen=True)
class Complete:
    recipient: str
    requester: str
    repeat: bool = False
    kind: Literal["complete"] = "complete"


@dataclass(frozen=True)
class Unintelligible:
    kind: Literal["unintelligible"] = "unintelligible"


Decision = NeedField | Complete | Unintelligible


@dataclass(frozen=True)
class Resolution:
    decision: Decision
    attributes: SessionAttributes


def resolve_one_shot(slots: TurnSlots, attributes: SessionAttributes) -> Resolution:
    """Resolve a turn that may name both parties at once.

    Fields are checked in fixed order, recipient before requester. A field the
    turn leaves out falls back to the session, so a value already stored is
    never asked for again. Whatever the turn supplied is stored before asking.
    """
    updated = _store_supplied(slots, attributes)
    for slot_field in FIELD_ORDER:
        if updated.get(slot_field) is None:
            return _finish(NeedField(field=slot_field), updated)
    return _complete(updated)


def resolve_dialog_turn(slots: TurnSlots, attributes: SessionAttributes) -> Resolution:
    """Resolve a turn whose single slot only makes sense against the session."""
    supplied = slots.supplied()
    if len(supplied) == len(FIELD_ORDER):
        return resolve_one_shot(slots, attributes)
    if not supplied:
        if attributes.is_complete:
            return _complete(attributes)
        return _finish(Unintelligible(), attributes)

    slot_field = supplied[0]
    updated = attributes.with_field(slot_field, str(slots.value(slot_field)))
    missing = _counterpart(slot_field)
    if updated.get(missing) is None:
        return _finish(NeedField(field=missing), updated)
    return _complete(updated)


def _store_supplied(slots: TurnSlots, attributes: SessionAttributes) -> SessionAttributes:
    updated = attributes
    for slot_field in slots.supplied():
        updated = updated.with_field(slot_field, str(slots.value(slot_field)))
    return updated


def _complete(attributes: SessionAttributes) -> Resolution:
    recipient = attributes.recipient
    requester = attributes.requester
    if recipient is None or requester is None:
        raise ValueError("complete requires both recipient and requester")
    decision = Complete(
        recipient=recipient,
        requester=requester,
        repeat=attributes.notified,
    )
    return _finish(decision, attributes.mark_notified())


def _finish(decision: Decision, attributes: SessionAttributes) -> Resolution:
    return Resolution(decision=decision, attributes=attributes)


def _counterpart(slot_field: Field) -> Field:
    return Field.REQUESTER if slot_field is Field.RECIPIENT else Field.RECIPIENT

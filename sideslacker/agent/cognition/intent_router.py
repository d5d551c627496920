from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from sideslacker.agent.cognition.dialog_state import (
    Complete,
    Resolution,
    resolve_dialog_turn,
    resolve_one_shot,
)
from sideslacker.agent.cognition.slots import TurnSlots
from sideslacker.agent.extremities.notification import (
    LoggingNotificationChannel,
    NotificationChannel,
)
from sideslacker.agent.observability.log_manager import get_component_logger
from sideslacker.agent.rendering import builder
from sideslacker.agent.rendering.types import AbstractOutput
from sideslacker.agent.session.attributes import commit_attributes, load_attributes
from sideslacker.agent.session.store import SessionStore

logger = get_component_logger("cognition.intent_router")


class UnknownIntent(ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"unknown_intent:{name}")
        self.name = name


class TriggerKind(str, Enum):
    DIRECT_REQUEST = "direct-request"
    DIALOG_CONTINUATION = "dialog-continuation"
    HELP = "help"
    CANCEL = "cancel"
    STOP = "stop"
    LAUNCH = "launch"
    SESSION_START = "session-start"
    SESSION_END = "session-end"


PLATFORM_INTENTS: dict[str, TriggerKind] = {
    "SlackIntent": TriggerKind.DIRECT_REQUEST,
    "DialogSlackIntent": TriggerKind.DIALOG_CONTINUATION,
    "AMAZON.HelpIntent": TriggerKind.HELP,
    "AMAZON.CancelIntent": TriggerKind.CANCEL,
    "AMAZON.StopIntent": TriggerKind.STOP,
}

PLATFORM_REQUEST_TYPES: dict[str, TriggerKind] = {
    "SessionStartedRequest": TriggerKind.SESSION_START,
    "LaunchRequest": TriggerKind.LAUNCH,
    "SessionEndedRequest": TriggerKind.SESSION_END,
}

_INTENT_REQUEST_TYPE = "IntentRequest"


@dataclass(frozen=True)
class Trigger:
    kind: TriggerKind
    session_id: str
    request_id: str | None = None


def parse_trigger_kind(trigger_type: str, intent_name: str | None = None) -> TriggerKind:
    """Map an envelope's request type and intent name onto a trigger kind.

    Raises UnknownIntent for any name that is neither a platform name nor a
    canonical trigger name.
    """
    request_type = str(trigger_type or "").strip()
    if request_type == _INTENT_REQUEST_TYPE:
        return _parse_name(str(intent_name or "").strip())
    mapped = PLATFORM_REQUEST_TYPES.get(request_type)
    if mapped is not None:
        return mapped
    return _parse_name(request_type)


def _parse_name(name: str) -> TriggerKind:
    mapped = PLATFORM_INTENTS.get(name)
    if mapped is not None:
        return mapped
    try:
        return TriggerKind(name.lower())
    except ValueError:
        raise UnknownIntent(name) from None


class IntentRouter:
    def __init__(
        self,
        store: SessionStore,
        *,
        channel: NotificationChannel | None = None,
    ) -> None:
        self._store = store
        self._channel = channel or LoggingNotificationChannel()
        self._handlers: dict[TriggerKind, Callable[[Trigger, TurnSlots], AbstractOutput | None]] = {
            TriggerKind.DIRECT_REQUEST: self._handle_direct_request,
            TriggerKind.DIALOG_CONTINUATION: self._handle_dialog_continuation,
            TriggerKind.HELP: lambda trigger, slots: builder.help_prompt(),
            TriggerKind.CANCEL: lambda trigger, slots: builder.goodbye(),
            TriggerKind.STOP: lambda trigger, slots: builder.goodbye(),
            TriggerKind.LAUNCH: lambda trigger, slots: builder.welcome(),
            TriggerKind.SESSION_START: self._handle_session_started,
            TriggerKind.SESSION_END: self._handle_session_ended,
        }
        missing = set(TriggerKind) - set(self._handlers)
        if missing:
            raise RuntimeError(f"unrouted triggers: {sorted(kind.value for kind in missing)}")

    def route(self, trigger: Trigger, slots: TurnSlots | None = None) -> AbstractOutput | None:
        logger.info("routing turn", extra=_log_context(trigger, event="router.trigger"))
        handler = self._handlers[trigger.kind]
        return handler(trigger, slots or TurnSlots())

    def _handle_direct_request(self, trigger: Trigger, slots: TurnSlots) -> AbstractOutput:
        return self._resolve(trigger, slots, resolve_one_shot)

    def _handle_dialog_continuation(self, trigger: Trigger, slots: TurnSlots) -> AbstractOutput:
        return self._resolve(trigger, slots, resolve_dialog_turn)

    def _resolve(
        self,
        trigger: Trigger,
        slots: TurnSlots,
        resolver: Callable[..., Resolution],
    ) -> AbstractOutput:
        previous = load_attributes(self._store, trigger.session_id)
        resolution = resolver(slots, previous)
        if resolution.attributes != previous:
            commit_attributes(
                self._store,
                trigger.session_id,
                resolution.attributes,
                previous=previous,
            )
        decision = resolution.decision
        logger.info(
            "resolved turn",
            extra=_log_context(trigger, event="resolver.decision", decision=decision.kind),
        )
        if isinstance(decision, Complete) and not decision.repeat:
            self._notify(trigger, decision)
        return builder.build(decision)

    def _notify(self, trigger: Trigger, decision: Complete) -> None:
        # Delivery is fire-and-forget; the dialog outcome never depends on it.
        try:
            delivered = self._channel.notify(decision.recipient, decision.requester)
        except Exception as exc:
            logger.exception(
                "notification channel raised",
                exc_info=exc,
                extra=_log_context(trigger, event="notification.failed", status="raised"),
            )
            return
        if not delivered:
            logger.warning(
                "notification not delivered",
                extra=_log_context(trigger, event="notification.failed", status="undelivered"),
            )

    def _handle_session_started(self, trigger: Trigger, slots: TurnSlots) -> None:
        logger.info("session started", extra=_log_context(trigger, event="router.session_started"))
        return None

    def _handle_session_ended(self, trigger: Trigger, slots: TurnSlots) -> None:
        self._store.clear(trigger.session_id)
        logger.info("session ended", extra=_log_context(trigger, event="router.session_ended"))
        return None


def _log_context(trigger: Trigger, **fields: str) -> dict[str, str | None]:
    return {
        "session_id": trigger.session_id,
        "request_id": trigger.request_id,
        "trigger": trigger.kind.value,
        **fields,
    }

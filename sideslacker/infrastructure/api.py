from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from sideslacker.agent.cognition.intent_router import (
    IntentRouter,
    Trigger,
    UnknownIntent,
    parse_trigger_kind,
)
from sideslacker.agent.cognition.slots import build_turn_slots
from sideslacker.agent.extremities.notification import (
    NotificationChannel,
    build_notification_channel,
)
from sideslacker.agent.observability.log_manager import get_component_logger
from sideslacker.agent.rendering.types import output_to_dict
from sideslacker.agent.session.store import InMemorySessionStore, SessionStore

logger = get_component_logger("infrastructure.api")


class TurnEnvelope(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    trigger_type: str = Field(..., alias="triggerType", min_length=1)
    session_id: str = Field(..., alias="sessionId", min_length=1)
    request_id: str | None = Field(default=None, alias="requestId")
    intent_name: str | None = Field(default=None, alias="intentName")
    slots: dict[str, Any] = Field(default_factory=dict)


def create_app(
    *,
    store: SessionStore | None = None,
    channel: NotificationChannel | None = None,
) -> FastAPI:
    router = IntentRouter(
        store or InMemorySessionStore(),
        channel=channel or build_notification_channel(),
    )
    api = FastAPI(title="SideSlacker API", version="0.1.0")

    @api.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @api.post("/turns")
    def handle_turn(envelope: TurnEnvelope) -> dict[str, Any]:
        try:
            kind = parse_trigger_kind(envelope.trigger_type, envelope.intent_name)
        except UnknownIntent as exc:
            logger.warning(
                "unknown intent %r",
                exc.name,
                extra={
                    "event": "api.unknown_intent",
                    "session_id": envelope.session_id,
                    "request_id": envelope.request_id,
                    "error_code": "unknown_intent",
                },
            )
            raise HTTPException(status_code=400, detail="unknown_intent") from exc
        trigger = Trigger(
            kind=kind,
            session_id=envelope.session_id,
            request_id=envelope.request_id,
        )
        output = router.route(trigger, build_turn_slots(envelope.slots))
        return {"sessionId": envelope.session_id, "output": output_to_dict(output)}

    return api


_APP: FastAPI | None = None


def get_app() -> FastAPI:
    global _APP
    if _APP is None:
        _APP = create_app()
    return _APP

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal


@dataclass(frozen=True)
class Card:
    title: str
    body: str


@dataclass(frozen=True)
class Ask:
    prompt: str
    reprompt: str
    is_prompt_markup: bool = False
    is_reprompt_markup: bool = False
    type: Literal["ask"] = "ask"


@dataclass(frozen=True)
class Tell:
    text: str
    card: Card | None = None
    type: Literal["tell"] = "tell"


AbstractOutput = Ask | Tell


def output_to_dict(output: AbstractOutput | None) -> dict[str, Any]:
    if output is None:
        return {"type": "none"}
    if isinstance(output, Ask):
        return {
            "type": output.type,
            "prompt": output.prompt,
            "is_prompt_markup": output.is_prompt_markup,
            "reprompt": output.reprompt,
            "is_reprompt_markup": output.is_reprompt_markup,
        }
    card = None
    if output.card is not None:
        card = {"title": output.card.title, "body": output.card.body}
    return {"type": output.type, "text": output.text, "card": card}

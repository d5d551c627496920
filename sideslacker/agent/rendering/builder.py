from __future__ import annotations

from sideslacker.agent.cognition.dialog_state import (
    Complete,
    Decision,
    NeedField,
    Unintelligible,
)
from sideslacker.agent.cognition.slots import Field
from sideslacker.agent.rendering.types import Ask, Card, Tell

CARD_TITLE = "SideSlacker"

_FIELD_PROMPTS: dict[Field, str] = {
    Field.RECIPIENT: "Who are you here to see?",
    Field.REQUESTER: "What's your name?",
}
_UNINTELLIGIBLE_PROMPT = (
    "Sorry, I didn't understand that, please say your name or who you're here to visit."
)
_WELCOME_PROMPT = "Welcome to Sidebench, who are you here to see? I can send them a message for you"
_WELCOME_REPROMPT = "I can help send a message to whoever you're here to see"
_HELP_PROMPT = (
    "I can send a message to anybody in the office. Just tell me your name and who you're here to see"
    " in a form like, I'm Bob here to see Kevin. "
)
_GOODBYE_TEXT = "Goodbye"


def build(decision: Decision) -> Ask | Tell:
    if isinstance(decision, NeedField):
        return ask(prompt_for(decision.field))
    if isinstance(decision, Complete):
        return confirmation(decision.recipient, decision.requester)
    if isinstance(decision, Unintelligible):
        return ask(_UNINTELLIGIBLE_PROMPT)
    raise TypeError(f"unsupported decision: {decision!r}")


def prompt_for(slot_field: Field) -> str:
    return _FIELD_PROMPTS[slot_field]


def ask(prompt: str, reprompt: str | None = None) -> Ask:
    return Ask(prompt=prompt, reprompt=prompt if reprompt is None else reprompt)


def confirmation(recipient: str, requester: str) -> Tell:
    text = f"Ok, {requester}, I just sent a message to {recipient}, please have a seat and wait."
    return Tell(text=text, card=Card(title=CARD_TITLE, body=text))


def welcome() -> Ask:
    return ask(_WELCOME_PROMPT, _WELCOME_REPROMPT)


def help_prompt() -> Ask:
    reprompt = prompt_for(Field.RECIPIENT)
    return ask(_HELP_PROMPT + reprompt, reprompt)


def goodbye() -> Tell:
    return Tell(text=_GOODBYE_TEXT)

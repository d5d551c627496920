from __future__ import annotations

from sideslacker.agent.cognition.dialog_state import Complete, NeedField, Unintelligible
from sideslacker.agent.cognition.slots import Field
from sideslacker.agent.rendering import Ask, Card, Tell, build, output_to_dict
from sideslacker.agent.rendering.builder import help_prompt, welcome


def test_need_field_prompts_repeat_as_reprompt() -> None:
    recipient = build(NeedField(field=Field.RECIPIENT))
    requester = build(NeedField(field=Field.REQUESTER))
    assert recipient == Ask(prompt="Who are you here to see?", reprompt="Who are you here to see?")
    assert requester == Ask(prompt="What's your name?", reprompt="What's your name?")
    assert recipient.is_prompt_markup is False
    assert recipient.is_reprompt_markup is False


def test_complete_mentions_both_names_with_card() -> None:
    output = build(Complete(recipient="Kevin", requester="Sam"))
    text = "Ok, Sam, I just sent a message to Kevin, please have a seat and wait."
    assert output == Tell(text=text, card=Card(title="SideSlacker", body=text))


def test_repeat_complete_renders_same_confirmation() -> None:
    first = build(Complete(recipient="Kevin", requester="Sam"))
    again = build(Complete(recipient="Kevin", requester="Sam", repeat=True))
    assert first == again


def test_unintelligible_reprompts_same_question() -> None:
    output = build(Unintelligible())
    assert isinstance(output, Ask)
    assert output.prompt == (
        "Sorry, I didn't understand that, please say your name or who you're here to visit."
    )
    assert output.reprompt == output.prompt


def test_help_and_welcome_prompts() -> None:
    assert help_prompt().prompt.endswith("Who are you here to see?")
    assert help_prompt().reprompt == "Who are you here to see?"
    assert welcome().reprompt != welcome().prompt


def test_output_to_dict_shapes() -> None:
    assert output_to_dict(None) == {"type": "none"}
    assert output_to_dict(Tell(text="Goodbye")) == {"type": "tell", "text": "Goodbye", "card": None}
    asked = output_to_dict(build(NeedField(field=Field.REQUESTER)))
    assert asked == {
        "type": "ask",
        "prompt": "What's your name?",
        "is_prompt_markup": False,
        "reprompt": "What's your name?",
        "is_reprompt_markup": False,
    }

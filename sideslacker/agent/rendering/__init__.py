from sideslacker.agent.rendering.builder import build
from sideslacker.agent.rendering.types import AbstractOutput
from sideslacker.agent.rendering.types import Ask
from sideslacker.agent.rendering.types import Card
from sideslacker.agent.rendering.types import Tell
from sideslacker.agent.rendering.types import output_to_dict

__all__ = [
    "AbstractOutput",
    "Ask",
    "Card",
    "Tell",
    "build",
    "output_to_dict",
]

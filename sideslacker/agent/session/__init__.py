from .attributes import SessionAttributes
from .attributes import commit_attributes
from .attributes import load_attributes
from .store import InMemorySessionStore
from .store import SessionStore

__all__ = [
    "InMemorySessionStore",
    "SessionAttributes",
    "SessionStore",
    "commit_attributes",
    "load_attributes",
]

"""Startup content: catalog, dialogue lines and balance overrides."""

from platypor.content.dialogue import DialogueBook, DialogueData, DialogueLine
from platypor.content.loader import ContentLoadError, load_balance, load_catalog, load_dialogues

__all__ = [
    "ContentLoadError",
    "DialogueBook",
    "DialogueData",
    "DialogueLine",
    "load_balance",
    "load_catalog",
    "load_dialogues",
]

"""Textual front end: app, screens, and the editor key adapter."""

from .controller import EditorUIHooks, TextualEditorAdapter, normalize_key
from .app import DeckApp, main

__all__ = ["DeckApp", "EditorUIHooks", "TextualEditorAdapter", "main", "normalize_key"]

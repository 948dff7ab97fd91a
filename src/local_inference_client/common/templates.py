"""Prompt templating helpers."""
from __future__ import annotations
from pathlib import Path

INPUT_PLACEHOLDER = "{{input}}"

def load_template(path: str) -> str:
    """
    Load a prompt template file.

    Args:
        path: Path to template.
    """
    return Path(path).read_text(encoding="utf-8")

def render_prompt(template: str, user_input: str) -> str:
    """
    Render user input into the template.

    A template without the placeholder is returned with the input
    appended on a new line, so the user's text is never dropped.

    Args:
        template: Template content containing {{input}}.
        user_input: Input string.

    Returns:
        Rendered prompt.
    """
    if INPUT_PLACEHOLDER not in template:
        return f"{template.rstrip()}\n{user_input}"
    return template.replace(INPUT_PLACEHOLDER, user_input)

from __future__ import annotations

from collections.abc import Iterable

from .models import SkillProperties, SkillWithLocation

_HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)


def html_escape(value: str) -> str:
    # "&" must be replaced first
    for char, entity in _HTML_ESCAPES:
        value = value.replace(char, entity)
    return value


def to_prompt_with_location(skills: Iterable[SkillWithLocation]) -> str:
    """Formats skills into an <available_skills> block for agent prompts.

    Only the name, description and (when known) manifest location are
    rendered; optional properties are left out.
    """
    lines = ["<available_skills>"]

    for skill in skills:
        lines.append("<skill>")
        lines.extend(["<name>", html_escape(skill.properties.name), "</name>"])
        lines.extend(["<description>", html_escape(skill.properties.description), "</description>"])
        if skill.location is not None:
            lines.extend(["<location>", html_escape(skill.location), "</location>"])
        lines.append("</skill>")

    lines.append("</available_skills>")
    return "\n".join(lines)


def to_prompt(skills: Iterable[SkillProperties]) -> str:
    """Formats skills without locations."""
    return to_prompt_with_location(SkillWithLocation(properties=props) for props in skills)

"""String templating with ``{name}`` placeholders.

Unlike :meth:`str.format`, only the exact ``{name}`` tokens are touched:
format specs, attribute access, and stray braces are left alone, so a
template can safely contain JSON or other brace-heavy text.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping

_VARIABLE = re.compile(r"\{([^{}]*)\}")

Replacements = Mapping[str, str | int | float]


def template_variables(text: str) -> tuple[str, ...]:
    """Return placeholder names in order of first appearance.

    Empty placeholders (``{}``) are skipped.

    Examples:
        >>> template_variables("User {name} is {age} ({name})")
        ('name', 'age')
    """
    seen: dict[str, None] = {}
    for match in _VARIABLE.finditer(text):
        name = match.group(1)
        if name:
            seen.setdefault(name, None)
    return tuple(seen)


def template(text: str) -> Callable[[Replacements], str]:
    """Compile *text* into a function that fills its placeholders.

    Every occurrence of ``{key}`` is replaced with ``str(value)``.  Keys
    not present in the template are ignored.

    Raises (from the returned function):
        KeyError: If a placeholder has no replacement.

    Examples:
        >>> greet = template("Hello {name}!")
        >>> greet({"name": "World"})
        'Hello World!'
    """
    variables = template_variables(text)

    def render(replacements: Replacements) -> str:
        missing = [name for name in variables if name not in replacements]
        if missing:
            raise KeyError(f"Missing template variables: {', '.join(missing)}")
        result = text
        for key, value in replacements.items():
            result = result.replace(f"{{{key}}}", str(value))
        return result

    return render

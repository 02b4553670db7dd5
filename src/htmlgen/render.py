"""
Literal ``{{KEY}}`` placeholder substitution for page templates.
"""

import re
from typing import Iterable, Mapping, Set

RE_PLACEHOLDER = re.compile(r"\{\{([A-Za-z0-9_]+)\}\}")

PLACEHOLDER_POLICIES = ("passthrough", "strict")


class UnresolvedPlaceholderError(ValueError):
    def __init__(self, names: Iterable[str]):
        self.names = sorted(set(names))
        super().__init__(
            "Template placeholders without a value: "
            + ", ".join("{{%s}}" % n for n in self.names)
        )


def find_placeholders(template: str) -> Set[str]:
    return set(RE_PLACEHOLDER.findall(template))


def render_template(
    template: str, fields: Mapping[str, str], policy: str = "passthrough"
) -> str:
    """Replace every ``{{KEY}}`` in ``template`` with ``fields[KEY]``.

    Values are inserted as-is; callers escape them. Field keys that do not
    occur in the template are ignored. Placeholders without a field are left
    in the output untouched, unless ``policy`` is ``"strict"``, in which case
    UnresolvedPlaceholderError is raised.
    """
    if policy not in PLACEHOLDER_POLICIES:
        raise ValueError(f"Unknown placeholder policy: {policy!r}")
    if policy == "strict":
        missing = find_placeholders(template) - set(fields)
        if missing:
            raise UnresolvedPlaceholderError(missing)
    # Single pass: substituted values are never re-scanned
    return RE_PLACEHOLDER.sub(lambda m: fields.get(m.group(1), m.group(0)), template)


__all__ = [
    "RE_PLACEHOLDER",
    "PLACEHOLDER_POLICIES",
    "UnresolvedPlaceholderError",
    "find_placeholders",
    "render_template",
]

"""Placeholder substitution for the generated bundle class."""

from __future__ import annotations

import re
from typing import Mapping

from .errors import TemplateRenderingError

__all__ = ["render_template"]


_PLACEHOLDER = re.compile(r"{{\s*(?P<key>\w+)\s*}}")


def render_template(template: str, context: Mapping[str, str]) -> str:
    """Replace every ``{{ key }}`` in ``template`` with ``context[key]``.

    Single braces are left alone, so PHP blocks survive untouched. An unknown
    key raises :class:`TemplateRenderingError`.
    """

    def substitute(match: re.Match[str]) -> str:
        key = match.group("key")
        try:
            return context[key]
        except KeyError as exc:
            raise TemplateRenderingError(f"missing value for '{key}'") from exc

    return _PLACEHOLDER.sub(substitute, template)

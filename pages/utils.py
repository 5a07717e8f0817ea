"""Helpers shared by page objects."""

import re

from errors import UsageError

_FORMAT_TOKEN = re.compile(r"%(%|s)")


def prepare_xpath_string(template: str, value: str) -> str:
    """Substitute ``value`` into the first ``%s`` placeholder of ``template``.

    Follows printf rules for the tokens it knows: ``%%`` becomes a literal ``%``.
    A template without a placeholder is returned unchanged apart from that
    unescaping. Only one substitution is made, so any further ``%s`` stays in
    the result.

    Raises:
        UsageError: If ``template`` or ``value`` is not a string.
    """
    if not isinstance(template, str):
        raise UsageError(f"template must be a str, got {type(template).__name__}")
    if not isinstance(value, str):
        raise UsageError(f"value must be a str, got {type(value).__name__}")

    substituted = False

    def _replace(match: re.Match) -> str:
        nonlocal substituted
        if match.group(1) == "%":
            return "%"
        if substituted:
            return match.group(0)
        substituted = True
        return value

    return _FORMAT_TOKEN.sub(_replace, template)

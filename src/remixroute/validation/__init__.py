"""Route name validation — ordered rules, first failure wins.

Usage::

    from remixroute.validation import validate_route_name

    error = validate_route_name("items..new")
    # "Route name cannot contain consecutive dots"

The result is either an error message or ``None``, the same shape the
host's text prompt expects for inline validation.
"""

from collections.abc import Sequence

from remixroute.config import ScaffoldConfig
from remixroute.validation.rules import (
    Validator,
    allowed_characters,
    has_letters,
    no_consecutive_dots,
    no_edge_dots,
    not_empty,
)

__all__ = [
    "DEFAULT_RULES",
    "Validator",
    "allowed_characters",
    "has_letters",
    "no_consecutive_dots",
    "no_edge_dots",
    "not_empty",
    "route_name_validator",
    "rules_for",
    "validate_route_name",
]

DEFAULT_RULES: tuple[Validator, ...] = (not_empty, no_edge_dots, no_consecutive_dots)


def validate_route_name(
    name: str,
    rules: Sequence[Validator] = DEFAULT_RULES,
) -> str | None:
    """Check *name* against *rules* in order.

    Args:
        name: The user-supplied route name (e.g. ``"items.new"``).
        rules: Validators to apply. Each returns an error message string
            on failure, or ``None`` on success.

    Returns:
        The message of the first failing rule, or ``None`` when every
        rule passes.
    """
    for rule in rules:
        error = rule(name)
        if error is not None:
            return error
    return None


def rules_for(config: ScaffoldConfig) -> tuple[Validator, ...]:
    """Default rules plus the optional ones *config* enables."""
    rules = list(DEFAULT_RULES)
    if config.strict_characters:
        rules.append(allowed_characters)
    if config.require_letters:
        rules.append(has_letters)
    return tuple(rules)


def route_name_validator(config: ScaffoldConfig) -> Validator:
    """Bind :func:`validate_route_name` to the rules *config* selects."""
    rules = rules_for(config)

    def check(value: str) -> str | None:
        return validate_route_name(value, rules)

    return check

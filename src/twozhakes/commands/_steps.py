"""Command-line spellings of operators and getters.

Steps are colon-separated: the operator name followed by its arguments::

    add:1:day   subtract:2:hours   set:hour:3   start:month   end:day
    next_day_of_week:4             start_of_next:year

``add``/``subtract`` take an amount then a unit, ``set`` takes a field
then a value. Every other name is looked up in the operator namespace and
called with the coerced arguments.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from twozhakes.algebra.getters import getters
from twozhakes.algebra.operators import operators
from twozhakes.domain.errors import UnknownTemporalName

if TYPE_CHECKING:
    from twozhakes.algebra.context import Algebra
    from twozhakes.algebra.registry import Setter
    from twozhakes.algebra.zone import Getter, Operator

SEPARATOR = ":"
STEP_ALIASES = {"start": "start_of", "end": "end_of"}


def coerce_argument(text: str) -> int | bool | str:
    lowered = text.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    try:
        return int(text)
    except ValueError:
        return text


def _amount(text: str, step: str) -> int | float:
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        msg = f"{text!r} is not a number in step {step!r}"
        raise click.BadParameter(msg, param_hint="STEP") from None


def _arity(step: str, args: list[str], expected: int) -> None:
    if len(args) != expected:
        msg = f"Step {step!r} takes {expected} argument(s), got {len(args)}"
        raise click.BadParameter(msg, param_hint="STEP")


def build_step(text: str, algebra: Algebra) -> Operator:
    """Turn one STEP argument into an operator.

    Raises:
        click.BadParameter: unknown operator, wrong arity or bad amount.
        UnknownTemporalName: the unit or field name is not recognized.
    """
    name, *args = text.split(SEPARATOR)
    name = STEP_ALIASES.get(name, name)

    if name in ("add", "subtract"):
        _arity(text, args, 2)
        amount, unit = args
        return operators[name](algebra.resolve_unit(unit)(_amount(amount, text)))
    if name == "set":
        _arity(text, args, 2)
        field, amount = args
        return operators.set(algebra.resolve_setter(field)(_amount(amount, text)))

    if name not in operators:
        known = ", ".join(sorted(operators))
        msg = f"Unknown operator {name!r} (known: {known})"
        raise click.BadParameter(msg, param_hint="STEP")
    return _call_factory(operators[name], name, [coerce_argument(a) for a in args])


def build_getter(name: str, algebra: Algebra) -> Setter | Getter[Any]:
    """A setter for field names, else a no-argument getter by name."""
    try:
        return algebra.resolve_setter(name)
    except UnknownTemporalName:
        if name not in getters:
            raise
    return _call_factory(getters[name], name, [])


def _call_factory(factory: Any, name: str, args: list[Any]) -> Any:
    try:
        return factory(*args)
    except TypeError as exc:
        msg = f"Cannot build {name!r} from {args!r}: {exc}"
        raise click.BadParameter(msg) from exc

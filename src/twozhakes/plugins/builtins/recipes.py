"""Built-in plugin exposing the recipes as named combinators.

After loading, ``operators.next_day_of_week(4)`` and
``getters.is_election_year()`` are available alongside the built-ins.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from twozhakes.plugins import hookimpl


class RecipesPlugin:
    """Registers next-weekday/next-month/election recipes."""

    @hookimpl
    def register_operators(self) -> dict[str, Callable[..., Any]]:
        from twozhakes.recipes import (
            next_day_of_week,
            next_election_day,
            next_month,
            start_of_next,
        )

        return {
            "next_day_of_week": next_day_of_week,
            "next_month": next_month,
            "start_of_next": start_of_next,
            "next_election_day": lambda: next_election_day,
        }

    @hookimpl
    def register_getters(self) -> dict[str, Callable[..., Any]]:
        from twozhakes.recipes import is_election_year

        return {"is_election_year": lambda: is_election_year}

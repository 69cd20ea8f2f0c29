"""Pluggy hook specifications for twozhakes extensions.

Plugins contribute new operator and getter combinators by name. Names are
added to :data:`twozhakes.operators` / :data:`twozhakes.getters`; built-in
names can never be replaced.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pluggy

hookspec = pluggy.HookspecMarker("twozhakes")


class TwozhakesHookSpec:
    """Hook specifications for the twozhakes plugin system."""

    @hookspec
    def register_operators(self) -> dict[str, Callable[..., Any]] | None:
        """Return name -> operator factory mappings.

        A factory takes any parameters and returns an operator
        ``(instant, zone) -> instant``.
        """

    @hookspec
    def register_getters(self) -> dict[str, Callable[..., Any]] | None:
        """Return name -> getter factory mappings.

        A factory takes any parameters and returns a getter
        ``(instant, zone) -> value``.
        """

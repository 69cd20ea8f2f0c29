"""Plugin system — pluggy hooks for contributing operators and getters."""

import pluggy

hookimpl = pluggy.HookimplMarker("twozhakes")

__all__ = ["hookimpl"]

"""Infrastructure layer — the calendar/timezone engine.

Zone lookup goes through :mod:`zoneinfo` (backed by ``tzdata``), the host
zone is guessed with ``tzlocal``, and free-form text is parsed with
``python-dateutil``. Field, arithmetic and formatting semantics follow
moment-timezone with its English locale.
"""

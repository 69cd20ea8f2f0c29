"""Next US federal election day.

Federal elections fall on the Tuesday after the first Monday in November
of even-numbered years. Everything is computed in Washington DC time; the
caller's zone does not matter.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from twozhakes.algebra.compose import compose_ops
from twozhakes.algebra.context import get_zone
from twozhakes.algebra.operators import add, set, start_of
from twozhakes.algebra.registry import setters, units
from twozhakes.domain.instant import Instant, as_instant
from twozhakes.recipes.next import next_day_of_week

if TYPE_CHECKING:
    from twozhakes.algebra.zone import ZoneContext
    from twozhakes.domain.instant import Instantish

logger = logging.getLogger(__name__)

ELECTION_ZONE_ID = "America/New_York"
NOVEMBER = 10
MONDAY = 1
POLLS_CLOSE_HOUR = 17

start_of_next_year = compose_ops(start_of(units.year), add(units.year(1)))


def is_election_year(instant: Instantish, zone: ZoneContext) -> bool:
    return zone.extract(instant, units.year) % 2 == 0


def next_election_day(instant: Instantish, zone: ZoneContext | None = None) -> Instant:
    """Start of the next election day whose polls have not yet closed.

    Usable directly as an operator: ``UTC.operate(i, next_election_day)``.
    """
    dc = get_zone(ELECTION_ZONE_ID)
    current = as_instant(instant)
    while True:
        if not dc.extract(current, is_election_year):
            current = dc.operate(current, start_of_next_year)
            continue
        election_day = dc.operate(
            current,
            set(setters.month(NOVEMBER)),
            start_of(units.month),
            next_day_of_week(MONDAY, inclusive=True),
            add(units.day(1)),
        )
        polls_close = dc.operate(election_day, set(units.hour(POLLS_CLOSE_HOUR)))
        if current < polls_close:
            return election_day
        logger.debug("Polls closed for %s; trying the next year", election_day)
        current = dc.operate(current, start_of_next_year)

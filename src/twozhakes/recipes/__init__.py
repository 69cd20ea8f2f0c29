"""Recipes — calendar questions answered purely with the algebra.

"When is next Thursday?", "when is next April?", "when is the next US
federal election?". Nothing here touches the calendar engine directly.
"""

from twozhakes.recipes.election import is_election_year, next_election_day
from twozhakes.recipes.next import next_day_of_week, next_month, start_of_next

__all__ = [
    "is_election_year",
    "next_day_of_week",
    "next_election_day",
    "next_month",
    "start_of_next",
]

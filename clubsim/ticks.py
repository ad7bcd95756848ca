# clubsim/ticks.py
from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List, Sequence, TypeVar

from clubsim.context import SimulationContext
from clubsim.errors import TickFailure

logger = logging.getLogger(__name__)

E = TypeVar("E")


def _record_failure(context: SimulationContext, label: str, exc: Exception) -> None:
    logger.warning("%s failed on %s", label, context.date, exc_info=True)
    context.failures.append(TickFailure(label=label, date=context.date, error=exc, club_id=context.club_id))


def run_entity_tick(context: SimulationContext, label: str, tick: Callable[[], Sequence[E]]) -> List[E]:
    """
    Run one entity's tick through the context's measurement sink.

    A tick that raises is logged, recorded on `context.failures` and counts as
    "no events" for that entity, so the rest of the club still ticks.
    """
    try:
        events = context.measure(label, tick)
    except Exception as exc:
        _record_failure(context, label, exc)
        return []
    return list(events or [])


def event_label(event: Any) -> str:
    """e.g. "handle StaffEvent BIRTHDAY: id: 4"."""
    entity_id = getattr(event, "player_id", None)
    if entity_id is None:
        entity_id = getattr(event, "staff_id", None)
    if entity_id is None:
        entity_id = getattr(event, "club_id", None)
    return f"handle {type(event).__name__} {event.kind.name}: id: {entity_id}"


def dispatch_events(
    context: SimulationContext,
    events: Iterable[E],
    handle: Callable[[E, SimulationContext], Any],
) -> None:
    """Hand each event to `handle`; a handler that raises only loses that one event."""
    for event in events:
        try:
            handle(event, context)
        except Exception as exc:
            _record_failure(context, event_label(event), exc)

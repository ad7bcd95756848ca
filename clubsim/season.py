# clubsim/season.py
from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any, Callable, Dict, List, Optional, Sequence

from clubsim import config
from clubsim.club import Club
from clubsim.context import SimulationContext
from clubsim.errors import InvalidInput, TickFailure
from clubsim.events import EventHandlers
from clubsim.measure import MeasureSink, estimate_result
from clubsim.schedule import Schedule, ScheduleItem

logger = logging.getLogger(__name__)

# (fixture, home club, guest club, context) -> whatever the match engine reports
MatchResolver = Callable[[ScheduleItem, Club, Club, SimulationContext], Any]


@dataclass
class DayReport:
    date: date
    ticked_club_ids: List[int] = field(default_factory=list)
    fixtures: List[ScheduleItem] = field(default_factory=list)
    results: List[Any] = field(default_factory=list)
    failures: List[TickFailure] = field(default_factory=list)
    handled: List[Any] = field(default_factory=list)


class SeasonDriver:
    """
    Plain-English:
      - Owns the simulated date for one season: `start` sets it to the first
        day of the schedule, every `step` ticks that day and moves it on by
        exactly one day, `finish` tears it down. It never goes backwards.
      - Every club ticks every day (bye clubs sit out their round's match day);
        fixtures are handed to the match resolver only after all club ticks
        for the day are done.
      - `workers > 1` ticks clubs on a thread pool, one task per club.
      - `cancel()` is honoured between days, never in the middle of one.
    """

    def __init__(
        self,
        clubs: Sequence[Club],
        schedule: Schedule,
        match_resolver: Optional[MatchResolver] = None,
        handlers: Optional[EventHandlers] = None,
        seed: int = config.DEFAULT_SEED,
        workers: int = 1,
        measure: MeasureSink = estimate_result,
        skip_bye_clubs: bool = config.SKIP_BYE_CLUBS_ON_MATCHDAY,
    ):
        self.clubs: List[Club] = list(clubs)
        self.clubs_by_id: Dict[int, Club] = {c.id: c for c in self.clubs}
        if len(self.clubs_by_id) != len(self.clubs):
            raise InvalidInput("Club ids in a season must be unique")
        unknown = sorted(set(schedule.club_ids) - set(self.clubs_by_id))
        if unknown:
            raise InvalidInput(f"Schedule refers to clubs the season does not have: {unknown}")

        self.schedule = schedule
        self.match_resolver = match_resolver
        self.handlers = handlers or EventHandlers()
        self.seed = int(seed)
        self.workers = max(1, int(workers))
        self.measure = measure
        self.skip_bye_clubs = bool(skip_bye_clubs)

        self.current_date: Optional[date] = None
        self.started = False
        self.finished = False
        self._cancel = threading.Event()

    # -----------------------------------------------------------------------
    # Lifecycle
    # -----------------------------------------------------------------------

    def start(self) -> None:
        if self.started:
            raise RuntimeError("season already started")
        self.started = True
        self.current_date = self.schedule.start_date
        logger.info("season start %s (%d clubs, %d fixtures, ends %s)",
                    self.current_date, len(self.clubs), len(self.schedule), self.schedule.end_date)

    def finish(self) -> None:
        if not self.started:
            raise RuntimeError("season was never started")
        if self.finished:
            return
        logger.info("season finished at %s", self.current_date)
        self.current_date = None
        self.finished = True

    def cancel(self) -> None:
        self._cancel.set()

    @property
    def cancelled(self) -> bool:
        return self._cancel.is_set()

    @property
    def is_complete(self) -> bool:
        return self.current_date is not None and self.current_date > self.schedule.end_date

    # -----------------------------------------------------------------------
    # Day loop
    # -----------------------------------------------------------------------

    def clubs_for(self, when: date) -> List[Club]:
        """Clubs that tick on `when`: everyone, minus that round's byes when skipping them."""
        if not self.skip_bye_clubs:
            return list(self.clubs)
        byes = set(self.schedule.byes_on(when))
        return [c for c in self.clubs if c.id not in byes]

    def step(self) -> DayReport:
        if not self.started or self.finished:
            raise RuntimeError("season is not running")
        today = self.current_date
        context = SimulationContext(date=today, seed=self.seed, measure=self.measure)
        report = DayReport(date=today)

        clubs = self.clubs_for(today)
        self._tick_clubs(clubs, context)
        report.ticked_club_ids = [c.id for c in clubs]

        # every club tick for the day has finished by now
        for item in self.schedule.get_matches(today):
            report.fixtures.append(item)
            if self.match_resolver is None:
                continue
            self._resolve_fixture(item, context, report)

        report.failures = list(context.failures)
        report.handled = list(context.handled)
        if report.failures:
            logger.warning("%s: %d entity tick(s) failed", today, len(report.failures))

        self.current_date = today + timedelta(days=1)
        return report

    def _resolve_fixture(self, item: ScheduleItem, context: SimulationContext, report: DayReport) -> None:
        home = self.clubs_by_id[item.home_club_id]
        guest = self.clubs_by_id[item.guest_club_id]
        try:
            report.results.append(self.match_resolver(item, home, guest, context))
        except Exception as exc:
            label = f"resolve match: {item.home_club_id} v {item.guest_club_id}"
            logger.warning("%s failed on %s", label, item.date, exc_info=True)
            context.failures.append(TickFailure(label=label, date=item.date, error=exc))

    def _tick_clubs(self, clubs: List[Club], context: SimulationContext) -> None:
        if self.workers == 1 or len(clubs) < 2:
            for club in clubs:
                club.simulate(context, self.handlers)
            return
        with ThreadPoolExecutor(max_workers=self.workers) as pool:
            futures = [pool.submit(club.simulate, context, self.handlers) for club in clubs]
            for fut in futures:
                fut.result()

    def run(self, on_day: Optional[Callable[[DayReport], None]] = None) -> List[DayReport]:
        """Step from the current date through the last round; finish unless cancelled."""
        if not self.started:
            self.start()
        reports: List[DayReport] = []
        while not self.finished and not self.is_complete:
            if self.cancelled:
                logger.info("season cancelled before %s", self.current_date)
                return reports
            report = self.step()
            reports.append(report)
            if on_day is not None:
                on_day(report)
        self.finish()
        return reports

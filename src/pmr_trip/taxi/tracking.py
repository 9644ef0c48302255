"""Scheduling and persistence loop for simulated taxi rides.

The simulator itself is pure; this module owns the clock (a simpy
environment) and decides when snapshots reach the simulation record.
"""

import logging
from collections.abc import Generator
from typing import Protocol

import simpy
from pydantic import BaseModel, Field

from pmr_trip.core.exceptions import SessionStateError, SessionTerminatedError
from pmr_trip.settings import TaxiSettings

from .session import SessionStatus, TaxiSimulationSession
from .simulator import TaxiSimulator

logger = logging.getLogger(__name__)


class SimulationSnapshot(BaseModel):
    """Fields written to the simulation record on each flush."""

    session_id: str
    position_actuelle: dict[str, float]
    progression_pct: float = Field(ge=0.0, le=100.0)
    eta_minutes: int = Field(ge=0)
    statut_course: str


def snapshot_from_session(session: TaxiSimulationSession) -> SimulationSnapshot:
    return SimulationSnapshot(
        session_id=session.session_id,
        position_actuelle=session.current_position.to_mapping(),
        progression_pct=session.progress_percent,
        eta_minutes=session.remaining_eta_minutes,
        statut_course=session.status.course_label,
    )


class SnapshotSink(Protocol):
    def save(self, snapshot: SimulationSnapshot) -> None: ...


class TaxiTrackingProcess:
    """Advances one session on a fixed cadence inside a simpy environment.

    One tick every session.tick_interval_seconds; a snapshot is saved every
    persist_every ticks, on arrival, and on start/stop.
    """

    def __init__(
        self,
        env: simpy.Environment,
        simulator: TaxiSimulator,
        session: TaxiSimulationSession,
        sink: SnapshotSink | None = None,
        persist_every: int | None = None,
        settings: TaxiSettings | None = None,
    ):
        self._env = env
        self._simulator = simulator
        self._session = session
        self._sink = sink
        settings = settings or TaxiSettings()
        self._persist_every = persist_every or settings.persist_every
        self._process: simpy.Process | None = None

    @property
    def session(self) -> TaxiSimulationSession:
        return self._session

    @property
    def is_running(self) -> bool:
        return self._process is not None and self._process.is_alive

    def start(self) -> simpy.Process:
        """Launch the tick loop; also resumes a stopped ride from its progress."""
        if self.is_running:
            raise SessionStateError(
                f"Tracking for session {self._session.session_id} is already running"
            )
        if self._session.is_terminal:
            raise SessionTerminatedError(
                f"Session {self._session.session_id} has already arrived"
            )

        if self._session.status == SessionStatus.PENDING:
            self._session = self._simulator.begin(self._session)
            self._persist()

        self._process = self._env.process(self._run())
        return self._process

    resume = start

    def stop(self) -> TaxiSimulationSession:
        """Interrupt the loop and persist the stopped session.

        Refused for a ride that was never started or has already arrived.
        """
        stopped = self._simulator.stop(self._session)

        if self.is_running:
            self._process.interrupt("stop requested")
        # The interrupted process exits at the current simulated instant,
        # before any further tick, so a new loop can be started right away.
        self._process = None

        self._session = stopped
        self._persist()
        return self._session

    def _run(self) -> Generator[simpy.Event]:
        session_id = self._session.session_id
        try:
            while not self._session.is_terminal:
                yield self._env.timeout(self._session.tick_interval_seconds)
                self._session = self._simulator.advance(self._session)

                if (
                    self._session.is_terminal
                    or self._session.ticks_elapsed % self._persist_every == 0
                ):
                    self._persist()
                    logger.info(
                        f"Progression: {self._session.progress_percent:.0f}%, "
                        f"ETA: {self._session.remaining_eta_minutes} min",
                        extra={"session_id": session_id},
                    )
        except simpy.Interrupt as interrupt:
            logger.info(
                f"Tracking interrupted: {interrupt.cause}", extra={"session_id": session_id}
            )
            return

        logger.info("Taxi arrived at destination", extra={"session_id": session_id})

    def _persist(self) -> None:
        if self._sink is None:
            return
        self._sink.save(snapshot_from_session(self._session))

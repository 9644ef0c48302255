"""Deterministic taxi ride simulation.

A ride is split into a fixed number of ticks. Each tick moves the taxi a
constant share of the way from origin to destination and decays the ETA
linearly. The simulator keeps no state between calls: every operation takes a
session and returns the next one, so scheduling and persistence belong to the
caller (see tracking.TaxiTrackingProcess).

Positions are interpolated linearly in latitude/longitude degrees, not along
the great circle. This is only accurate for short rides within one city,
which is the only way the simulation is used.
"""

import logging
import math

from pmr_trip.core.exceptions import (
    InvalidArgumentError,
    SessionStateError,
    SessionTerminatedError,
)
from pmr_trip.geo.models import GeoPoint
from pmr_trip.settings import TaxiSettings

from .session import SessionStatus, TaxiSimulationSession

logger = logging.getLogger(__name__)

# An agent walking to the passenger: 10 steps, one per second
AGENT_APPROACH_STEPS = 10
AGENT_APPROACH_SECONDS = 10.0


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def interpolate(origin: GeoPoint, destination: GeoPoint, progress_percent: float) -> GeoPoint:
    """Linear interpolation in degree space at progress_percent (0-100)."""
    if progress_percent <= 0.0:
        return origin
    if progress_percent >= 100.0:
        return destination

    fraction = progress_percent / 100
    lat = origin.latitude + (destination.latitude - origin.latitude) * fraction
    lon = origin.longitude + (destination.longitude - origin.longitude) * fraction
    return GeoPoint(latitude=lat, longitude=lon)


def remaining_eta(total_eta_minutes: float, progress_percent: float) -> int:
    return round_half_up(total_eta_minutes * (100 - progress_percent) / 100)


class TaxiSimulator:
    """Drives TaxiSimulationSession values from origin to destination."""

    def __init__(self, settings: TaxiSettings | None = None):
        self._settings = settings or TaxiSettings()

    def prepare(
        self,
        origin: GeoPoint,
        destination: GeoPoint,
        total_eta_minutes: float | None = None,
        total_ticks: int | None = None,
        animation_seconds: float | None = None,
    ) -> TaxiSimulationSession:
        """Create a PENDING session parked at the origin."""
        eta = self._settings.default_eta_minutes if total_eta_minutes is None else total_eta_minutes
        ticks = self._settings.total_ticks if total_ticks is None else total_ticks
        duration = (
            self._settings.animation_seconds if animation_seconds is None else animation_seconds
        )

        if eta <= 0:
            raise InvalidArgumentError(f"ETA must be positive, got {eta}")
        if ticks < 1:
            raise InvalidArgumentError(f"Total ticks must be >= 1, got {ticks}")
        if duration <= 0:
            raise InvalidArgumentError(f"Animation duration must be positive, got {duration}")

        return TaxiSimulationSession(
            origin=origin,
            destination=destination,
            total_eta_minutes=eta,
            total_ticks=ticks,
            animation_seconds=duration,
            current_position=origin,
            remaining_eta_minutes=round_half_up(eta),
        )

    def start(
        self,
        origin: GeoPoint,
        destination: GeoPoint,
        total_eta_minutes: float | None = None,
        total_ticks: int | None = None,
        animation_seconds: float | None = None,
    ) -> TaxiSimulationSession:
        """Create a session and put it straight into RUNNING."""
        session = self.prepare(
            origin,
            destination,
            total_eta_minutes=total_eta_minutes,
            total_ticks=total_ticks,
            animation_seconds=animation_seconds,
        )
        return self.begin(session)

    def start_agent_approach(
        self, agent_position: GeoPoint, meeting_point: GeoPoint
    ) -> TaxiSimulationSession:
        """Start moving an assistance agent towards the passenger's meeting point."""
        return self.start(
            agent_position,
            meeting_point,
            total_eta_minutes=AGENT_APPROACH_SECONDS / 60,
            total_ticks=AGENT_APPROACH_STEPS,
            animation_seconds=AGENT_APPROACH_SECONDS,
        )

    def begin(self, session: TaxiSimulationSession) -> TaxiSimulationSession:
        """PENDING -> RUNNING.

        A stopped ride is resumed through advance(), never restarted here.
        """
        if session.status != SessionStatus.PENDING:
            raise SessionStateError(
                f"Session {session.session_id} cannot start from {session.status.value}"
            )
        logger.info(f"Taxi simulation {session.session_id} started")
        return session.model_copy(update={"status": SessionStatus.RUNNING})

    def advance(
        self, session: TaxiSimulationSession, tick_count: int = 1
    ) -> TaxiSimulationSession:
        """Move the taxi forward by tick_count ticks.

        Resumes a STOPPED session. Progress is clamped at 100, where the
        session becomes ARRIVED with a zero ETA.
        """
        if not isinstance(tick_count, int) or isinstance(tick_count, bool):
            raise InvalidArgumentError(f"Tick count must be an integer, got {tick_count!r}")
        if tick_count <= 0:
            raise InvalidArgumentError(f"Tick count must be >= 1, got {tick_count}")
        if session.status == SessionStatus.ARRIVED:
            raise SessionTerminatedError(f"Session {session.session_id} has already arrived")
        if session.status == SessionStatus.PENDING:
            raise SessionStateError(f"Session {session.session_id} has not been started")

        ticks = min(session.total_ticks, session.ticks_elapsed + tick_count)

        if ticks >= session.total_ticks:
            logger.info(f"Taxi simulation {session.session_id} arrived")
            return session.model_copy(
                update={
                    "ticks_elapsed": session.total_ticks,
                    "progress_percent": 100.0,
                    "current_position": session.destination,
                    "remaining_eta_minutes": 0,
                    "status": SessionStatus.ARRIVED,
                }
            )

        progress = ticks * 100 / session.total_ticks
        return session.model_copy(
            update={
                "ticks_elapsed": ticks,
                "progress_percent": progress,
                "current_position": interpolate(session.origin, session.destination, progress),
                "remaining_eta_minutes": remaining_eta(session.total_eta_minutes, progress),
                "status": SessionStatus.RUNNING,
            }
        )

    def stop(self, session: TaxiSimulationSession) -> TaxiSimulationSession:
        """Pause a running ride where it is; advance() resumes it.

        Stopping an already stopped ride is a no-op transition.
        """
        if session.status == SessionStatus.ARRIVED:
            raise SessionTerminatedError(f"Session {session.session_id} has already arrived")
        if session.status == SessionStatus.PENDING:
            raise SessionStateError(f"Session {session.session_id} has not been started")
        logger.info(
            f"Taxi simulation {session.session_id} stopped at {session.progress_percent:.0f}%"
        )
        return session.model_copy(update={"status": SessionStatus.STOPPED})

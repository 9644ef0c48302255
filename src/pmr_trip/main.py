"""
PMR trip core - demo entry point

Prices an assisted reservation and plays one simulated taxi leg to arrival,
logging every snapshot the tracking workflow would persist.

    python -m pmr_trip.main "Paris Gare de Lyon" "Paris, Champs-Élysées"
"""

import logging
import sys

import simpy

from pmr_trip.billing import (
    InvoiceRecord,
    InvoiceRecordBuilder,
    TripChargeRequest,
    compute_invoice,
    should_issue_invoice,
)
from pmr_trip.geo import resolve_route
from pmr_trip.settings import Settings, get_settings
from pmr_trip.sim_logging import log_session_context, setup_logging_from_settings
from pmr_trip.taxi import (
    SimulationSnapshot,
    TaxiSimulationSession,
    TaxiSimulator,
    TaxiTrackingProcess,
    generate_crew,
)

logger = logging.getLogger(__name__)


class LoggingSnapshotSink:
    """Keeps snapshots in memory and logs each one."""

    def __init__(self) -> None:
        self.snapshots: list[SimulationSnapshot] = []

    def save(self, snapshot: SimulationSnapshot) -> None:
        self.snapshots.append(snapshot)
        logger.info(
            f"Snapshot {snapshot.statut_course}: {snapshot.progression_pct:.0f}% "
            f"ETA {snapshot.eta_minutes} min at {snapshot.position_actuelle}"
        )


def price_reservation(
    request: TripChargeRequest, settings: Settings
) -> InvoiceRecord | None:
    if not should_issue_invoice(request):
        logger.info("No assistance requested, skipping invoice")
        return None
    return InvoiceRecordBuilder(settings.billing).build(compute_invoice(request))


def run_ride(
    origin_label: str,
    destination_label: str,
    settings: Settings | None = None,
    sink: LoggingSnapshotSink | None = None,
) -> TaxiSimulationSession:
    """Play a taxi leg in simulated time until the taxi arrives."""
    settings = settings or get_settings()
    sink = sink or LoggingSnapshotSink()

    origin, destination = resolve_route(origin_label, destination_label)
    simulator = TaxiSimulator(settings.taxi)
    session = simulator.prepare(origin, destination)

    crew = generate_crew()
    env = simpy.Environment()
    tracking = TaxiTrackingProcess(env, simulator, session, sink=sink, settings=settings.taxi)

    with log_session_context(session.session_id):
        logger.info(
            f"Taxi {crew.vehicule.modele} ({crew.vehicule.plaque}) driven by "
            f"{crew.chauffeur.prenom} {crew.chauffeur.nom} heading to {destination_label}"
        )
        tracking.start()
        env.run()

    return tracking.session


def main():
    """Main entry point - prices and simulates one assisted taxi leg."""
    settings = get_settings()
    setup_logging_from_settings(settings.logging)

    args = sys.argv[1:]
    origin_label = args[0] if len(args) > 0 else "Paris Gare de Lyon"
    destination_label = args[1] if len(args) > 1 else "Paris, Champs-Élysées"

    request = TripChargeRequest(
        requires_assistance=True,
        leg_count=1,
        is_multimodal=False,
        origin_label=origin_label,
        destination_label=destination_label,
    )
    record = price_reservation(request, settings)
    if record:
        logger.info(f"{record.description}: {record.montant_ttc:.2f} EUR TTC")

    session = run_ride(origin_label, destination_label, settings)
    logger.info(f"Ride finished with status {session.status.value}")


if __name__ == "__main__":
    main()

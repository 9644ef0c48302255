"""Synthetic vehicle and driver profiles for simulated taxi rides."""

from __future__ import annotations

from faker import Faker
from pydantic import BaseModel, Field

VEHICLE_MODELS = [
    "Peugeot e-208",
    "Renault Zoé",
    "Tesla Model 3",
    "Mercedes Classe E",
    "BMW Série 5",
    "Audi A4",
    "Volkswagen ID.4",
    "Toyota Prius",
]

VEHICLE_COLOURS = ["Blanc", "Noir", "Gris", "Bleu", "Rouge", "Argenté"]


def create_faker_instance(seed: int | None = None) -> Faker:
    """French-locale Faker; pass a seed for deterministic output."""
    fake = Faker("fr_FR")
    if seed is not None:
        fake.seed_instance(seed)
    return fake


# Module-level faker instance for production (unseeded for variety)
_faker = create_faker_instance()


class VehicleInfo(BaseModel):
    plaque: str
    modele: str
    couleur: str
    type: str = "berline"


class DriverInfo(BaseModel):
    prenom: str
    nom: str
    note: float = Field(ge=4.0, le=5.0)
    nb_courses: int = Field(ge=500, lt=3500)
    telephone: str


class TaxiCrew(BaseModel):
    vehicule: VehicleInfo
    chauffeur: DriverInfo


def generate_mobile_number(fake: Faker) -> str:
    pairs = " ".join(str(fake.random_int(10, 99)) for _ in range(4))
    return f"06 {pairs}"


def generate_crew(faker: Faker | None = None) -> TaxiCrew:
    """Generate the vehicle and driver shown to the passenger for a ride.

    Args:
        faker: Optional Faker instance. Uses module-level instance if not provided.
               Pass a seeded Faker for deterministic output.
    """
    fake = faker or _faker

    vehicle = VehicleInfo(
        plaque=fake.license_plate(),
        modele=fake.random_element(VEHICLE_MODELS),
        couleur=fake.random_element(VEHICLE_COLOURS),
    )
    driver = DriverInfo(
        prenom=fake.first_name(),
        nom=fake.last_name(),
        # Ratings between 4.0 and 5.0 at one decimal
        note=fake.random_int(40, 50) / 10,
        nb_courses=fake.random_int(500, 3499),
        telephone=generate_mobile_number(fake),
    )
    return TaxiCrew(vehicule=vehicle, chauffeur=driver)

"""Command-line driver: a tiny rental desk on top of the agency library."""
import click
from flask import Blueprint, current_app

from ..exceptions import (
    InvalidArgumentError,
    VehicleAlreadyRentedError,
    VehicleUnavailableError,
)
from ..services.agency import RentalAgency
from ..services.common import customer_from_dict, vehicle_from_dict
from ..utils.filters import fmt_iso_local, fmt_money

bp = Blueprint("agency", __name__, cli_group=None)

RENTAL_ERRORS = (InvalidArgumentError, VehicleUnavailableError, VehicleAlreadyRentedError)


def build_sample_agency(fleet=None) -> RentalAgency:
    """Agency stocked with the configured sample fleet."""
    records = fleet if fleet is not None else current_app.config["DEMO_FLEET"]
    return RentalAgency([vehicle_from_dict(d) for d in records])


def run_demo(model=None, days=None, echo=click.echo) -> bool:
    """
    Rent one vehicle from the sample agency and bring it back.
    Returns False (after printing the error) if the rental could not happen.
    """
    cfg = current_app.config
    model = model or cfg["DEMO_MODEL"]
    days = cfg["DEFAULT_RENTAL_DAYS"] if days is None else days
    tz = cfg["DISPLAY_TIMEZONE"]

    try:
        agency = build_sample_agency()
        customer = customer_from_dict(cfg["DEMO_CUSTOMER"])
        transaction = agency.rent_vehicle(customer, model, days)
    except RENTAL_ERRORS as e:
        echo(str(e))
        return False

    echo(f"Vehicle rented successfully! Total cost: {fmt_money(transaction.get_total_cost())}")
    echo(f"  {customer.name} has {transaction.vehicle.vehicle_id} since {fmt_iso_local(transaction.started_at, tz)}")

    agency.complete_rental(transaction)
    echo("Vehicle returned successfully.")
    return True


@bp.cli.command("demo")
@click.option("--model", default=None, help="Model to rent (default: DEMO_MODEL).")
@click.option("--days", type=int, default=None, help="Rental length in days.")
def demo_command(model, days):
    """Rent a vehicle from the sample fleet and return it."""
    if not run_demo(model, days):
        raise SystemExit(1)


@bp.cli.command("fleet")
@click.option("--days", type=int, default=None, help="Quote length in days.")
def fleet_command(days):
    """List the sample fleet with a quote per vehicle."""
    days = current_app.config["DEFAULT_RENTAL_DAYS"] if days is None else days
    agency = build_sample_agency()
    for v in agency.all_vehicles():
        status = "available" if v.is_available_for_rental() else "rented"
        click.echo(f"{v.vehicle_id:<6} {v.model:<12} {v.type:<10} {fmt_money(v.base_rental_rate)}/day  "
                   f"{days}d: {fmt_money(v.calculate_rental_cost(days))}  [{status}]")
    s = agency.summary()
    click.echo(f"{s['vehicles']} vehicles, {s['available']} available")


@bp.cli.command("quote")
@click.argument("vtype")
@click.argument("rate", type=float)
@click.argument("days", type=int)
@click.option("--ac", is_flag=True, help="Car has air conditioning.")
@click.option("--helmet", is_flag=True, help="Motorcycle requires a helmet.")
@click.option("--capacity", type=float, default=None, help="Truck load capacity.")
def quote_command(vtype, rate, days, ac, helmet, capacity):
    """Price an ad-hoc vehicle: TYPE RATE DAYS."""
    try:
        vehicle = vehicle_from_dict({
            "vehicle_id": "QUOTE",
            "model": "Quote",
            "type": vtype,
            "rate": rate,
            "has_air_conditioning": ac,
            "requires_helmet": helmet,
            "load_capacity": capacity,
        })
        if days < 1:
            raise InvalidArgumentError("Error: rental days must be positive")
    except InvalidArgumentError as e:
        click.echo(str(e))
        raise SystemExit(1)
    click.echo(f"{vehicle.type} for {days} day(s): {fmt_money(vehicle.calculate_rental_cost(days))}")

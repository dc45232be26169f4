from flask import Flask

from .controllers.cli import bp as cli_bp
from .utils.constants import DEFAULT_TIMEZONE

DEMO_FLEET = [
    {"vehicle_id": "C001", "model": "Sedan", "type": "car", "rate": 50, "has_air_conditioning": True},
    {"vehicle_id": "M001", "model": "Sport Bike", "type": "motorcycle", "rate": 30, "requires_helmet": True},
    {"vehicle_id": "T001", "model": "Cargo Truck", "type": "truck", "rate": 80, "load_capacity": 5},
]


def create_app(config=None):
    app = Flask(__name__)
    app.config.update(
        DEMO_FLEET=DEMO_FLEET,
        DEMO_CUSTOMER={"name": "John Doe", "customer_id": "CUST001"},
        DEMO_MODEL="Sedan",
        DEFAULT_RENTAL_DAYS=3,
        DISPLAY_TIMEZONE=DEFAULT_TIMEZONE,
    )
    app.config.from_prefixed_env("RENTAL_AGENCY")  # e.g. RENTAL_AGENCY_DEMO_MODEL=Sedan
    if config:
        app.config.update(config)

    app.register_blueprint(cli_bp)

    return app

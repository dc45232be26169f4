"""
demo.py
-------
Walk-through of the rental agency library without the flask CLI.

It builds the sample agency (a Sedan, a Sport Bike and a Cargo Truck), rents
a vehicle to the sample customer and returns it again.

Usage:
    $ python demo.py
    $ python demo.py "Cargo Truck" 2

The same flow is available as `flask --app rental_agency demo`.
"""
import sys

from rental_agency import create_app
from rental_agency.controllers.cli import run_demo


def main(argv=None):
    """Run the demo rental; return a process exit code."""
    argv = sys.argv[1:] if argv is None else argv
    model = argv[0] if argv else None
    days = int(argv[1]) if len(argv) > 1 else None

    app = create_app()
    with app.app_context():
        ok = run_demo(model, days, echo=print)

    if ok:
        print("✅ Demo complete.")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())

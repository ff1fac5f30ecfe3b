"""Print the car listings held in the store."""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rich.console import Console
from rich.table import Table

from car_listings.config import config
from car_listings.db.store import CarStore
from car_listings.services.listing import ListingService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler()],
)
logger = logging.getLogger(__name__)

console = Console()

DEMO_CAR = {
    "make": "Toyota",
    "model": "Corolla",
    "year": 2018,
    "price": 15000,
    "is_available": True,
    "owner_email": "a@x.com",
}


def show_listings(service: ListingService) -> None:
    """Show every listing as a table."""
    result = service.list_all()
    if not result.ok:
        console.print(f"[bold red]Error:[/bold red] {result.error.message}")
        return

    cars = result.value
    if not cars:
        console.print("\n[dim]No listings in database yet.[/dim]")
        return

    table = Table(title=f"Car Listings ({len(cars)})")
    table.add_column("ID", style="dim")
    table.add_column("Car", style="cyan")
    table.add_column("Year", justify="right")
    table.add_column("Price", justify="right")
    table.add_column("Available")
    table.add_column("Owner")
    table.add_column("Created")

    for car in cars:
        table.add_row(
            car.id,
            f"{car.make} {car.model}",
            str(car.year),
            f"{car.price:,}",
            "[green]yes[/green]" if car.is_available else "[red]no[/red]",
            car.owner_email,
            car.created_at.strftime("%Y-%m-%d %H:%M"),
        )

    console.print(table)


def main():
    parser = argparse.ArgumentParser(description="Show stored car listings")
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help=f"Path to the database (default: {config.db_path})",
    )
    parser.add_argument(
        "--seed",
        action="store_true",
        help="Create a demo listing before printing",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("car_listings").setLevel(logging.DEBUG)

    with CarStore(args.db) as store:
        service = ListingService(store)
        if args.seed:
            created = service.create_listing(DEMO_CAR)
            if created.ok:
                console.print(f"[green]Created[/green] {created.value.id}")
            else:
                console.print(f"[red]Seed failed:[/red] {created.error.message}")
        show_listings(service)


if __name__ == "__main__":
    main()

"""CLI entry point using Typer: the interactive front-desk menu."""
import logging
from typing import Callable, Dict, Iterable, Optional, TextIO

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from hotel_desk.app.config import settings
from hotel_desk.app.hotel.seed import create_hotel
from hotel_desk.app.models.schemas import GuestCreate, ReservationCreate
from hotel_desk.core.domain import (
    Hotel,
    HotelError,
    NoActiveReservationsError,
    NoGuestsRegisteredError,
    ReservationEntity,
    RoomEntity,
)

logger = logging.getLogger(__name__)

MENU_OPTIONS = {
    1: "Show All Rooms",
    2: "Show Available Rooms",
    3: "Register New Guest",
    4: "Make Reservation",
    5: "Show All Reservations",
    6: "Check Out",
    7: "Exit",
}
EXIT_OPTION = 7

app = typer.Typer(
    name="hotel-desk",
    help="Interactive front-desk console for a single hotel.",
    add_completion=False,
)


def setup_logging(level: str = "WARNING") -> None:
    """Setup logging configuration"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


class HotelConsole:
    """
    Numbered menu loop over one Hotel.

    Each iteration reads one choice and calls one Hotel operation. Domain
    errors and invalid input are reported and the menu is shown again; only
    the exit option or end of input stops the loop.
    """

    def __init__(
        self,
        hotel: Hotel,
        console: Optional[Console] = None,
        stream: Optional[TextIO] = None,
        currency: str = "₹",
    ):
        self.hotel = hotel
        self.console = console or Console()
        self.currency = currency
        # When set, input is read from this stream instead of stdin
        self._stream = stream
        self._handlers: Dict[int, Callable[[], None]] = {
            1: self.show_all_rooms,
            2: self.show_available_rooms,
            3: self.register_guest,
            4: self.make_reservation,
            5: self.show_reservations,
            6: self.check_out,
        }

    def run(self) -> None:
        while True:
            self.show_menu()
            try:
                raw = self._read("Choose option (1-7): ")
            except EOFError:
                self.console.print()
                break

            try:
                choice = int(raw)
            except ValueError:
                choice = None

            if choice == EXIT_OPTION:
                self.console.print("Thank you for using Hotel Management System!")
                break

            handler = self._handlers.get(choice)
            if handler is None:
                self.console.print("[red]Invalid choice! Please try again.[/red]")
                continue

            try:
                handler()
            except EOFError:
                self.console.print()
                break
            except HotelError as e:
                logger.debug(f"Menu option {choice} rejected: {e}")
                self.console.print(f"[red]Error:[/red] {escape(str(e))}")
            except ValidationError as e:
                self._print_validation_error(e)

    def show_menu(self) -> None:
        rule = "=" * 50
        self.console.print()
        self.console.print(rule)
        self.console.print(f"    [bold]{escape(self.hotel.name)} MANAGEMENT SYSTEM[/bold]")
        self.console.print(rule)
        for number, label in MENU_OPTIONS.items():
            self.console.print(f"{number}. {label}")
        self.console.print(rule)

    # ============== Menu options ==============

    def show_all_rooms(self) -> None:
        self._print_rooms("All Rooms", self.hotel.list_all_rooms())

    def show_available_rooms(self) -> bool:
        """Print available rooms; returns False when there are none."""
        rooms = self.hotel.list_available_rooms()
        if not rooms:
            self.console.print("[yellow]No available rooms found![/yellow]")
            return False
        self._print_rooms("Available Rooms", rooms)
        return True

    def register_guest(self) -> None:
        self.console.print("\n[bold]=== Guest Registration ===[/bold]")
        data = GuestCreate(
            name=self._read("Enter guest name: "),
            phone=self._read("Enter phone: "),
            email=self._read("Enter email: "),
        )
        guest = self.hotel.register_guest(**data.model_dump())
        self.console.print("[green]Guest registered successfully![/green]")
        self.console.print(escape(guest.describe()))

    def make_reservation(self) -> None:
        guests = self.hotel.list_guests()
        if not guests:
            raise NoGuestsRegisteredError()

        if not self.show_available_rooms():
            return

        room_number = self._read("\nEnter room number to book: ")
        check_in = self._read("Enter check-in date (DD/MM/YYYY): ")
        check_out = self._read("Enter check-out date (DD/MM/YYYY): ")
        nights = self._read("Enter number of nights: ")

        latest = guests[-1]
        for guest in guests:
            self.console.print(escape(guest.describe()))
        guest_id = self._read(escape(f"Enter guest ID [{latest.guest_id}]: ")) or latest.guest_id

        data = ReservationCreate(
            room_number=room_number,
            guest_id=guest_id,
            check_in_date=check_in,
            check_out_date=check_out,
            nights=nights,
        )
        reservation = self.hotel.create_reservation(**data.model_dump())
        self.console.print("\n[green]Reservation successful![/green]")
        self._print_reservation(reservation)

    def show_reservations(self) -> bool:
        """Print active reservations; returns False when there are none."""
        reservations = self.hotel.list_reservations()
        if not reservations:
            self.console.print("[yellow]No reservations found![/yellow]")
            return False

        table = Table(title="All Reservations")
        table.add_column("ID", justify="right")
        table.add_column("Guest")
        table.add_column("Room", justify="right")
        table.add_column("Check-in")
        table.add_column("Check-out")
        table.add_column("Nights", justify="right")
        table.add_column("Total Cost", justify="right")
        for r in reservations:
            guest = self.hotel.get_guest(r.guest_id)
            table.add_row(
                str(r.reservation_id),
                escape(guest.name),
                str(r.room_number),
                escape(r.check_in_date),
                escape(r.check_out_date),
                str(r.nights),
                self._money(r.total_cost),
            )
        self.console.print(table)
        return True

    def check_out(self) -> None:
        if not self.hotel.list_reservations():
            raise NoActiveReservationsError()

        self.show_reservations()
        raw = self._read("Enter reservation ID to check out: ")
        try:
            reservation_id = int(raw)
        except ValueError:
            self.console.print(f"[red]Invalid reservation ID:[/red] {escape(raw)}")
            return

        reservation = self.hotel.check_out(reservation_id)
        self.console.print("\n[bold]=== Checking Out ===[/bold]")
        self._print_reservation(reservation)
        self.console.print(f"Room {reservation.room_number} is now available.")

    # ============== Helpers ==============

    def _read(self, prompt: str) -> str:
        line = self.console.input(prompt, stream=self._stream)
        if self._stream is not None and not line:
            raise EOFError
        return line.strip()

    def _money(self, amount) -> str:
        return f"{self.currency}{amount}"

    def _print_rooms(self, title: str, rooms: Iterable[RoomEntity]) -> None:
        table = Table(title=title)
        table.add_column("Room", justify="right")
        table.add_column("Type")
        table.add_column("Rate", justify="right")
        table.add_column("Status")
        for room in rooms:
            table.add_row(
                str(room.room_number),
                room.room_type.value,
                f"{self._money(room.price_per_night)}/night",
                "Available" if room.is_available() else "Occupied",
            )
        self.console.print(table)

    def _print_reservation(self, reservation: ReservationEntity) -> None:
        guest = self.hotel.get_guest(reservation.guest_id)
        room = self.hotel.get_room(reservation.room_number)
        self.console.print("\n[bold]=== Reservation Details ===[/bold]")
        self.console.print(f"Reservation ID: {reservation.reservation_id}")
        self.console.print(escape(guest.describe()))
        self.console.print(escape(room.describe(self.currency)))
        self.console.print(
            f"Check-in: {escape(reservation.check_in_date)} | "
            f"Check-out: {escape(reservation.check_out_date)}"
        )
        self.console.print(
            f"Total Nights: {reservation.nights} | "
            f"Total Cost: {self._money(reservation.total_cost)}"
        )

    def _print_validation_error(self, error: ValidationError) -> None:
        for detail in error.errors():
            field = ".".join(str(part) for part in detail["loc"])
            self.console.print(f"[red]Invalid {escape(field)}:[/red] {escape(detail['msg'])}")


@app.command()
def main(
    hotel_name: Optional[str] = typer.Option(
        None,
        "--hotel-name",
        help="Hotel name shown in the menu header (defaults to HOTEL_NAME)",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (defaults to LOG_LEVEL)",
    ),
):
    """Run the interactive front-desk console."""
    setup_logging(log_level or settings.LOG_LEVEL)

    with create_hotel(name=hotel_name) as hotel:
        HotelConsole(hotel, currency=settings.CURRENCY_SYMBOL).run()


if __name__ == "__main__":
    app()

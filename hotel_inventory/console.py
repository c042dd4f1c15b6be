"""
Консольное меню отеля.

1. Описание номера
2. Свободные места
3. Бронирование
4. Выход
"""

from typing import Callable, Optional

from .inventory import BookRoomRequest, CustomerDetails, HotelService, NoCapacity
from .notifications import Customer
from .shared_kernel import DomainException, InvalidCategorySelector

MENU = (
    "\nEnter your choice:",
    "1. Display room details",
    "2. Check room availability",
    "3. Book room",
    "4. Exit",
)


class ConsoleFrontEnd:
    """Интерактивный цикл меню поверх HotelService."""

    def __init__(
        self,
        service: HotelService,
        read_line: Callable[[], str] = input,
        write: Callable[[str], None] = print,
    ):
        self._service = service
        self._read_line = read_line
        self._write = write

    def run(self) -> None:
        """Работает до выбора пункта 4 или конца ввода."""
        try:
            self._write("Enter your name to subscribe to notifications:")
            name = self._read_line().strip()
            self._service.subscribe(Customer(name, write=self._write))

            while self.handle_choice(self._ask_menu()):
                pass
        except EOFError:
            self._write("Exiting...")

    def handle_choice(self, choice: Optional[int]) -> bool:
        """Выполняет пункт меню; False - завершить цикл."""
        if choice == 1:
            self._display_room_details()
        elif choice == 2:
            self._check_availability()
        elif choice == 3:
            self._book_room()
        elif choice == 4:
            self._write("Exiting...")
            return False
        else:
            self._write("Invalid choice.")
        return True

    def _ask_menu(self) -> Optional[int]:
        for line in MENU:
            self._write(line)
        return self._read_int()

    def _ask_room_type(self) -> Optional[int]:
        self._write("Enter room type (1-4):")
        return self._read_int()

    def _read_int(self) -> Optional[int]:
        raw = self._read_line().strip()
        try:
            return int(raw)
        except ValueError:
            return None

    def _ask(self, prompt: str) -> str:
        self._write(prompt)
        return self._read_line().strip()

    def _display_room_details(self) -> None:
        selector = self._ask_room_type()
        try:
            self._write(self._service.describe_category(selector))
        except InvalidCategorySelector as e:
            self._write(e.user_message)

    def _check_availability(self) -> None:
        selector = self._ask_room_type()
        try:
            self._write(f"Available rooms: {self._service.check_availability(selector)}")
        except InvalidCategorySelector as e:
            self._write(e.user_message)

    def _book_room(self) -> None:
        selector = self._ask_room_type()
        if selector is None:
            self._write(InvalidCategorySelector.user_message)
            return

        customer = CustomerDetails(
            name=self._ask("Enter customer name: "),
            contact=self._ask("Enter contact number: "),
            gender=self._ask("Enter gender: "),
        )

        try:
            self._service.book_room(BookRoomRequest(selector=selector, customer=customer))
        except (InvalidCategorySelector, NoCapacity) as e:
            self._write(e.user_message)
            return
        except DomainException as e:
            self._write(str(e))
            return

        self._write("Room booked successfully.")

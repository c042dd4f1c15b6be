"""
Тесты для сервиса приложения HotelService.
"""
import pytest

from hotel_inventory import bootstrap_app
from hotel_inventory.config import CategorySettings, HotelConfig
from hotel_inventory.inventory import (
    BookingConfirmation,
    BookRoomRequest,
    CustomerDetails,
    NoCapacity,
    SlotNotOccupied,
)
from hotel_inventory.rooms import OutcomeKind, PricingPolicy, RoomFeature, RoomState
from hotel_inventory.shared_kernel import InvalidCategorySelector, RoomCategory


def _request(selector: int, **kwargs) -> BookRoomRequest:
    return BookRoomRequest(
        selector=selector,
        customer=CustomerDetails(name="Ravi", contact="98450", gender="M"),
        **kwargs,
    )


class TestQueries:
    """Тесты для пунктов меню 1 и 2."""

    @pytest.mark.parametrize(
        "selector, text",
        [
            (1, "Luxury Double Room: 1 double bed, AC, Free breakfast, Rs.4000 per night."),
            (2, "Deluxe Double Room: 1 double bed, AC, Rs.3000 per night."),
            (3, "Luxury Single Room: 1 single bed, AC, Free breakfast, Rs.2200 per night."),
            (4, "Deluxe Single Room: 1 single bed, Rs.1200 per night."),
        ],
    )
    def test_describe_category(self, service, selector, text):
        assert service.describe_category(selector) == text

    @pytest.mark.parametrize("selector, available", [(1, 10), (2, 20), (3, 10), (4, 20)])
    def test_check_availability(self, service, selector, available):
        assert service.check_availability(selector) == available

    @pytest.mark.parametrize("selector", [0, 5])
    def test_invalid_selector(self, service, selector):
        with pytest.raises(InvalidCategorySelector):
            service.describe_category(selector)
        with pytest.raises(InvalidCategorySelector):
            service.check_availability(selector)


class TestBookRoom:
    """Тесты для бронирования через сервис."""

    def test_book_room_returns_confirmation(self, service):
        confirmation = service.book_room(_request(1))

        assert isinstance(confirmation, BookingConfirmation)
        assert confirmation.category == RoomCategory.LUXURY_DOUBLE
        assert confirmation.slot_index == 0
        assert confirmation.description == "Double Room"
        assert confirmation.nightly_price == 4000
        assert confirmation.state == RoomState.RESERVED
        assert service.check_availability(1) == 9

    def test_book_room_with_discount_and_features(self, service):
        confirmation = service.book_room(
            _request(
                4,
                policy=PricingPolicy.DISCOUNTED,
                features=(RoomFeature.WIFI, RoomFeature.BREAKFAST),
            )
        )

        assert confirmation.description == "Single Room, Wi-Fi, Breakfast"
        assert confirmation.nightly_price == pytest.approx(1200 * 0.9 + 500)

    def test_booking_notifies_subscribers(self, service, recorder):
        """Успешное бронирование рассылает сообщение с названием категории."""
        service.subscribe(recorder)

        service.book_room(_request(2))

        assert recorder.messages == ["Room type deluxe double availability has changed."]

    def test_unsubscribed_customer_is_not_notified(self, service, recorder):
        service.subscribe(recorder)
        service.unsubscribe(recorder)

        service.book_room(_request(2))

        assert recorder.messages == []

    def test_full_category(self, service, recorder):
        """Сценарий: 10 бронирований проходят, 11-е - NoCapacity."""
        for _ in range(10):
            service.book_room(_request(1))
        assert service.check_availability(1) == 0

        service.subscribe(recorder)
        with pytest.raises(NoCapacity):
            service.book_room(_request(1))

        assert recorder.messages == []
        assert service.check_availability(1) == 0

    def test_invalid_selector_changes_nothing(self, service, recorder):
        service.subscribe(recorder)

        with pytest.raises(InvalidCategorySelector):
            service.book_room(_request(5))

        assert recorder.messages == []
        for selector, capacity in [(1, 10), (2, 20), (3, 10), (4, 20)]:
            assert service.check_availability(selector) == capacity


class TestLifecycle:
    """Тесты для заселения, выселения и отмены."""

    def test_check_in_and_out_releases_slot(self, service, recorder):
        service.book_room(_request(3))
        service.subscribe(recorder)

        check_in = service.check_in(3, 0)
        check_out = service.check_out(3, 0)

        assert check_in.kind == OutcomeKind.SUCCESS
        assert check_out.message == "Checked out successfully."
        assert service.check_availability(3) == 10
        assert recorder.messages == ["Room type luxury single availability has changed."]

    def test_cancel_releases_slot(self, service):
        service.book_room(_request(4))

        outcome = service.cancel(4, 0)

        assert outcome.message == "Reservation cancelled."
        assert service.check_availability(4) == 20

    def test_rejected_transition_is_reported(self, service):
        service.book_room(_request(4))

        outcome = service.check_out(4, 0)

        assert outcome.kind == OutcomeKind.REJECTED
        assert outcome.message == "Cannot check out. Room is not occupied."

    def test_empty_slot(self, service):
        with pytest.raises(SlotNotOccupied):
            service.check_in(1, 0)


def test_bootstrap_builds_independent_hotels():
    """Каждый вызов bootstrap_app создает отдельный отель."""
    first = bootstrap_app()
    second = bootstrap_app()

    first.book_room(_request(1))

    assert first.check_availability(1) == 9
    assert second.check_availability(1) == 10


def test_bootstrap_uses_config_capacities():
    config = HotelConfig(
        categories={
            RoomCategory.LUXURY_DOUBLE: CategorySettings(
                capacity=1, nightly_rate=5000, features_text="Tiny"
            )
        }
    )
    service = bootstrap_app(config=config)

    assert service.describe_category(1) == "Tiny"
    assert service.check_availability(1) == 1
    assert service.check_availability(2) == 20
    service.book_room(_request(1))
    with pytest.raises(NoCapacity):
        service.book_room(_request(1))


class TestLogging:
    """Тесты для журналирования операций сервиса."""

    def test_booking_with_verbose_logging_notifies(self, verbose_service, recorder, capsys):
        """Бронирование проходит и рассылает уведомление при уровне DEBUG."""
        verbose_service.subscribe(recorder)

        confirmation = verbose_service.book_room(_request(1))

        assert confirmation.slot_index == 0
        assert recorder.messages == ["Room type luxury double availability has changed."]
        assert "[INFO] Room booked" in capsys.readouterr().out

    def test_customer_details_are_not_logged(self, verbose_service, capsys):
        verbose_service.book_room(_request(2))

        captured = capsys.readouterr()
        assert "Ravi" not in captured.out
        assert "98450" not in captured.out
        assert "Ravi" not in captured.err

    @pytest.mark.parametrize("operation", ["check_in", "check_out", "cancel"])
    def test_failed_operation_is_logged_by_name(self, verbose_service, operation, capsys):
        with pytest.raises(SlotNotOccupied):
            getattr(verbose_service, operation)(1, 0)

        err = capsys.readouterr().err
        assert f"[WARNING] Ошибка при операции {operation}:" in err

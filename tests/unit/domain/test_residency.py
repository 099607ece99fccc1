"""Unit tests for the VIP residency workflow."""

import datetime as dt

import pytest

from trackly.domain import errors
from trackly.domain.models import Booking, OperationalTask, VipResidencyProtocol
from trackly.domain.residency import (
    BOOKING_SOURCE,
    DEFAULT_GIFTING,
    DEFAULT_PICKUP_TIME,
    DEFAULT_RIDER,
    ResidencyIds,
    default_room,
    effective_rider,
    is_pending,
    materialize_residency,
    pending_signals,
    provenance_key,
    source_display,
    stage_signal,
)
from trackly.domain.value_objects import (
    PaymentStatus,
    RoomStatus,
    TaskCategory,
    TaskPriority,
    TaskStatus,
    TransportLeg,
)

# pylint: disable=redefined-outer-name

IDS = ResidencyIds(protocol_id="vip-1", booking_id="bk-1", task_id="task-1")


def commit(signal, room_id="r-401", pickup_time=DEFAULT_PICKUP_TIME, rooms=()):
    """Materialize with fixed ids and the ``h1`` hotel context."""
    return materialize_residency(
        signal, room_id, pickup_time, rooms=rooms, ids=IDS, hotel_context="h1"
    )


# --- Pending & staging ---


def test_pending_signals_keep_order_and_skip_acknowledged(make_signal):
    """Only unacknowledged artist bookings are pending, in store order."""
    first = make_signal(id="sig-1")
    done = make_signal(id="sig-2", acknowledged=True)
    last = make_signal(id="sig-3")

    assert pending_signals([first, done, last]) == [first, last]
    assert is_pending(first)
    assert not is_pending(done)


def test_default_room_prefers_sanctuary(hotel_rooms):
    """A Sanctuary room wins over an earlier VIP room."""
    assert default_room(hotel_rooms).id == "r-401"


def test_default_room_falls_back_to_vip_then_first(make_room):
    """Without a Sanctuary: first VIP room, then first room, then none."""
    plain = make_room(id="r-1")
    vip = make_room(id="r-2", is_vip_room=True)

    assert default_room([plain, vip]).id == "r-2"
    assert default_room([plain]).id == "r-1"
    assert default_room([]) is None


def test_stage_signal_proposes_room_and_pickup(make_signal, hotel_rooms):
    """Staging derives a room and the default pickup time without side effects."""
    signal = make_signal()

    staged = stage_signal(signal, hotel_rooms)

    assert staged.signal is signal
    assert staged.default_room_id == "r-401"
    assert staged.default_pickup_time == "19:00"
    assert not signal.acknowledged


def test_stage_signal_without_rooms_proposes_none(make_signal):
    """With an empty inventory no room is proposed."""
    assert stage_signal(make_signal(), []).default_room_id is None


def test_stage_acknowledged_signal_is_rejected(make_signal, hotel_rooms):
    """An acknowledged signal cannot be staged again."""
    with pytest.raises(errors.SignalAlreadyAcknowledgedError):
        stage_signal(make_signal(acknowledged=True), hotel_rooms)


@pytest.mark.parametrize(
    "brand,display",
    [
        ("Sunday Theory", "Sunday Theory"),
        ("ST", "Sunday Theory"),
        ("The Yard", "The Yard"),
        (None, "The Yard"),
        ("", "The Yard"),
    ],
)
def test_source_display(brand, display):
    """Source brands map onto the two venues."""
    assert source_display(brand) == display


# --- Commit ---


def test_nova_example(make_signal, hotel_rooms):
    """An empty-rider signal committed to the Sanctuary yields the full bundle."""
    signal = make_signal(id="sig-nova", artist_name="Nova", event_date=dt.date(2026, 8, 9))

    bundle = commit(signal, rooms=hotel_rooms)

    assert bundle.protocol.rider == DEFAULT_RIDER
    assert bundle.booking.check_in == bundle.booking.check_out == dt.date(2026, 8, 9)
    assert bundle.task.priority is TaskPriority.CRITICAL
    assert bundle.task.due_date == dt.date(2026, 8, 9)
    assert bundle.signal.acknowledged is True
    assert bundle.acknowledged_signal_id == "sig-nova"


def test_commit_builds_protocol(make_signal, hotel_rooms):
    """The protocol carries rider, room, pickup leg and privacy notes."""
    signal = make_signal(rider=("Oat milk", "Blackout curtains"), source_brand="Sunday Theory")

    protocol = commit(signal, pickup_time="18:30", rooms=hotel_rooms).protocol

    assert protocol == VipResidencyProtocol(
        id="vip-1",
        artist_id="Nova",
        rider=("Oat milk", "Blackout curtains"),
        assigned_room_number="401",
        transport_schedule=(TransportLeg("18:30", "Airport", "T3S"),),
        security_required=True,
        entourage_size=1,
        hospitality_gifting=DEFAULT_GIFTING,
        privacy_notes="Authorized from Sunday Theory. Assigned to 401.",
        provenance="signal:" + signal.id,
    )


def test_commit_builds_vip_booking(make_signal, hotel_rooms):
    """The booking is VIP, single-day and pre-assigned to the chosen room."""
    signal = make_signal(
        management_email="mgmt@example.com", management_phone="+27 21 000 0000"
    )

    booking = commit(signal, rooms=hotel_rooms).booking

    assert booking == Booking(
        id="bk-1",
        guest_name="Nova",
        guest_email="mgmt@example.com",
        guest_phone="+27 21 000 0000",
        check_in=dt.date(2026, 8, 9),
        check_out=dt.date(2026, 8, 9),
        pax=1,
        source=BOOKING_SOURCE,
        is_vip=True,
        room_id="r-401",
        internal_table="The Sanctuary",
        payment_status=PaymentStatus.PENDING,
        special_requests=(
            "VIP RESIDENCY. Sanctuary Room 401. "
            "Rider: Standard VIP Refreshments, Premium Security Escort"
        ),
        welcome_pack_assigned=True,
        provenance="signal:" + signal.id,
    )


def test_commit_bypasses_vacancy_check(make_signal, make_room):
    """VIP rooms are pre-secured; an occupied room is still assigned."""
    room = make_room(id="r-9", room_number="9", status=RoomStatus.OCCUPIED)
    assert commit(make_signal(), room_id="r-9", rooms=[room]).booking.room_id == "r-9"


def test_commit_builds_setup_task(make_signal, hotel_rooms):
    """The setup task is critical, due on the event date, in the hotel context."""
    task = commit(make_signal(rider=("Piano",)), pickup_time="21:15", rooms=hotel_rooms).task

    assert isinstance(task, OperationalTask)
    assert task.title == "VIP SETUP: Nova (Room 401)"
    assert task.description == (
        "Rider Setup: Piano. Security protocol active. Pickup at 21:15."
    )
    assert task.context == "h1"
    assert task.status is TaskStatus.TODO
    assert task.category is TaskCategory.OPS
    assert task.progress == 0


def test_all_spawned_entities_share_provenance(make_signal, hotel_rooms):
    """Protocol, booking and task carry the signal's provenance key."""
    signal = make_signal()
    bundle = commit(signal, rooms=hotel_rooms)
    key = provenance_key(signal.id)

    assert bundle.provenance == key
    assert {bundle.protocol.provenance, bundle.booking.provenance, bundle.task.provenance} == {key}


def test_unknown_room_id_is_kept_with_tbd_number(make_signal, hotel_rooms):
    """A room id missing from inventory shows as TBD, priced as the Sanctuary."""
    bundle = commit(make_signal(), room_id="r-999", rooms=hotel_rooms)

    assert bundle.booking.room_id == "r-999"
    assert bundle.booking.internal_table == "The Sanctuary"
    assert bundle.protocol.assigned_room_number == "TBD"


@pytest.mark.parametrize("room_id", [None, ""])
def test_commit_without_room_is_rejected(make_signal, hotel_rooms, room_id):
    """No room, no commit; the signal stays pending."""
    signal = make_signal()
    with pytest.raises(errors.RoomNotSelectedError):
        commit(signal, room_id=room_id, rooms=hotel_rooms)
    assert signal.acknowledged is False


def test_commit_acknowledged_signal_is_rejected(make_signal, hotel_rooms):
    """A signal is materialized at most once."""
    with pytest.raises(errors.SignalAlreadyAcknowledgedError):
        commit(make_signal(acknowledged=True), rooms=hotel_rooms)


@pytest.mark.parametrize("pickup", ["7pm", "24:00", "19:60", "", "9:00"])
def test_commit_with_bad_pickup_time_is_rejected(make_signal, hotel_rooms, pickup):
    """Pickup times must be 24h ``HH:MM``."""
    with pytest.raises(errors.InvalidTimeError):
        commit(make_signal(), pickup_time=pickup, rooms=hotel_rooms)


def test_effective_rider_keeps_given_rider(make_signal):
    """A non-empty rider is used as-is, in order."""
    assert effective_rider(make_signal(rider=("B", "A"))) == ("B", "A")
    assert effective_rider(make_signal()) == DEFAULT_RIDER

"""
hotel_desk/core/domain/__init__.py

领域层入口点
"""
from hotel_desk.core.domain.exceptions import (
    HotelError,
    NotFoundError,
    RoomNotFoundError,
    RoomUnavailableError,
    GuestNotFoundError,
    ReservationNotFoundError,
    PreconditionError,
    NoGuestsRegisteredError,
    NoActiveReservationsError,
    InvalidStayError,
    DuplicateRoomError,
)
from hotel_desk.core.domain.room import DEFAULT_SERVICE_FEE, RoomState, RoomType, RoomEntity
from hotel_desk.core.domain.guest import GuestEntity
from hotel_desk.core.domain.reservation import ReservationEntity
from hotel_desk.core.domain.hotel import Hotel

__all__ = [
    "HotelError",
    "NotFoundError",
    "RoomNotFoundError",
    "RoomUnavailableError",
    "GuestNotFoundError",
    "ReservationNotFoundError",
    "PreconditionError",
    "NoGuestsRegisteredError",
    "NoActiveReservationsError",
    "InvalidStayError",
    "DuplicateRoomError",
    "DEFAULT_SERVICE_FEE",
    "RoomState",
    "RoomType",
    "RoomEntity",
    "GuestEntity",
    "ReservationEntity",
    "Hotel",
]

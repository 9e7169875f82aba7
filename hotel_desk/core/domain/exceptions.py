"""
hotel_desk/core/domain/exceptions.py

领域异常 - 所有业务失败都以这些异常上报，调用方状态保持不变
"""


class HotelError(Exception):
    """酒店领域异常基类"""

    pass


# ============== 未找到 ==============

class NotFoundError(HotelError, LookupError):
    """请求的对象不存在"""

    pass


class RoomNotFoundError(NotFoundError):
    """房间号不存在"""

    def __init__(self, room_number: int):
        self.room_number = room_number
        super().__init__(f"Room {room_number} does not exist")


class RoomUnavailableError(NotFoundError):
    """房间不存在或已被占用"""

    def __init__(self, room_number: int):
        self.room_number = room_number
        super().__init__(f"Room {room_number} is not available or invalid room number")


class GuestNotFoundError(NotFoundError):
    """客人不存在"""

    def __init__(self, guest_id: int):
        self.guest_id = guest_id
        super().__init__(f"Guest ID {guest_id} not found")


class ReservationNotFoundError(NotFoundError):
    """预订不存在"""

    def __init__(self, reservation_id: int):
        self.reservation_id = reservation_id
        super().__init__(f"Reservation ID {reservation_id} not found")


# ============== 前置条件不满足 ==============

class PreconditionError(HotelError):
    """操作的前置条件不满足"""

    pass


class NoGuestsRegisteredError(PreconditionError):
    """尚未登记任何客人"""

    def __init__(self):
        super().__init__("Please register a guest first")


class NoActiveReservationsError(PreconditionError):
    """没有进行中的预订"""

    def __init__(self):
        super().__init__("No active reservations")


# ============== 非法数据 ==============

class InvalidStayError(HotelError, ValueError):
    """住宿参数非法（晚数、房价）"""

    pass


class DuplicateRoomError(HotelError, ValueError):
    """房间号重复"""

    def __init__(self, room_number: int):
        self.room_number = room_number
        super().__init__(f"Room {room_number} already exists")


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
]

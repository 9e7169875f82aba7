"""
hotel_desk/core/domain/hotel.py

Hotel 聚合根 - 持有全部房间、客人与进行中的预订
"""
from typing import Dict, Iterable, List
import logging

from hotel_desk.core.domain.exceptions import (
    DuplicateRoomError,
    GuestNotFoundError,
    NoActiveReservationsError,
    NoGuestsRegisteredError,
    ReservationNotFoundError,
    RoomNotFoundError,
    RoomUnavailableError,
)
from hotel_desk.core.domain.guest import GuestEntity
from hotel_desk.core.domain.reservation import ReservationEntity
from hotel_desk.core.domain.room import RoomEntity

logger = logging.getLogger(__name__)


class Hotel:
    """
    Hotel 聚合根

    所有实体按 ID 存放在有序字典中，遍历顺序即创建顺序。失败的操作不修改
    任何集合或计数器。

    Example:
        >>> with Hotel("EVEREST HOTEL", rooms) as hotel:
        ...     guest = hotel.register_guest("Alice", "111", "a@x.com")
        ...     reservation = hotel.create_reservation(301, guest.guest_id, "01/01", "03/01", 2)
        ...     hotel.check_out(reservation.reservation_id)
    """

    def __init__(self, name: str, rooms: Iterable[RoomEntity] = ()):
        """
        初始化酒店

        Args:
            name: 酒店名称
            rooms: 初始房间，房间号必须唯一
        """
        self.name = name
        self._rooms: Dict[int, RoomEntity] = {}
        self._guests: Dict[int, GuestEntity] = {}
        self._reservations: Dict[int, ReservationEntity] = {}
        self._next_guest_id = 1
        self._next_reservation_id = 1

        for room in rooms:
            self.add_room(room)

    def __enter__(self) -> "Hotel":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # ============== 房间 ==============

    def add_room(self, room: RoomEntity) -> None:
        """
        加入房间

        Raises:
            DuplicateRoomError: 房间号已存在
        """
        if room.room_number in self._rooms:
            raise DuplicateRoomError(room.room_number)
        self._rooms[room.room_number] = room

    def get_room(self, room_number: int) -> RoomEntity:
        """
        根据房间号获取房间

        Raises:
            RoomNotFoundError: 房间不存在
        """
        room = self._rooms.get(room_number)
        if room is None:
            raise RoomNotFoundError(room_number)
        return room

    def list_all_rooms(self) -> List[RoomEntity]:
        """列出所有房间（创建顺序）"""
        return list(self._rooms.values())

    def list_available_rooms(self) -> List[RoomEntity]:
        """列出空闲房间，没有空闲房间时返回空列表"""
        return [room for room in self._rooms.values() if room.is_available()]

    # ============== 客人 ==============

    def register_guest(self, name: str, phone: str, email: str) -> GuestEntity:
        """
        登记客人，不检查重复

        Returns:
            新登记的客人
        """
        guest = GuestEntity(guest_id=self._next_guest_id, name=name, phone=phone, email=email)
        self._guests[guest.guest_id] = guest
        self._next_guest_id += 1
        logger.info(f"Guest {guest.guest_id} registered: {name}")
        return guest

    def get_guest(self, guest_id: int) -> GuestEntity:
        """
        根据 ID 获取客人

        Raises:
            GuestNotFoundError: 客人不存在
        """
        guest = self._guests.get(guest_id)
        if guest is None:
            raise GuestNotFoundError(guest_id)
        return guest

    def list_guests(self) -> List[GuestEntity]:
        """列出所有客人（登记顺序）"""
        return list(self._guests.values())

    # ============== 预订 ==============

    def create_reservation(
        self,
        room_number: int,
        guest_id: int,
        check_in_date: str,
        check_out_date: str,
        nights: int,
    ) -> ReservationEntity:
        """
        创建预订

        Args:
            room_number: 房间号，只在空闲房间中查找
            guest_id: 客人 ID
            check_in_date: 入住日期
            check_out_date: 离店日期
            nights: 入住晚数

        Returns:
            新预订

        Raises:
            NoGuestsRegisteredError: 尚未登记客人
            GuestNotFoundError: 客人不存在
            RoomUnavailableError: 房间不存在或已被占用
            InvalidStayError: 晚数不是正整数
        """
        if not self._guests:
            raise NoGuestsRegisteredError()

        guest = self.get_guest(guest_id)

        room = next(
            (r for r in self.list_available_rooms() if r.room_number == room_number),
            None,
        )
        if room is None:
            raise RoomUnavailableError(room_number)

        reservation = ReservationEntity(
            reservation_id=self._next_reservation_id,
            guest=guest,
            room=room,
            check_in_date=check_in_date,
            check_out_date=check_out_date,
            nights=nights,
        )
        self._reservations[reservation.reservation_id] = reservation
        self._next_reservation_id += 1
        return reservation

    def get_reservation(self, reservation_id: int) -> ReservationEntity:
        """
        根据 ID 获取进行中的预订

        Raises:
            ReservationNotFoundError: 预订不存在
        """
        reservation = self._reservations.get(reservation_id)
        if reservation is None:
            raise ReservationNotFoundError(reservation_id)
        return reservation

    def list_reservations(self) -> List[ReservationEntity]:
        """列出进行中的预订（创建顺序）"""
        return list(self._reservations.values())

    def check_out(self, reservation_id: int) -> ReservationEntity:
        """
        退房：释放房间并移除预订

        Args:
            reservation_id: 预订 ID，必须精确匹配

        Returns:
            已移除的预订

        Raises:
            NoActiveReservationsError: 没有进行中的预订
            ReservationNotFoundError: 预订不存在
        """
        if not self._reservations:
            raise NoActiveReservationsError()

        reservation = self.get_reservation(reservation_id)
        self._rooms[reservation.room_number].vacate()
        del self._reservations[reservation_id]
        logger.info(f"Reservation {reservation_id} checked out, room {reservation.room_number} released")
        return reservation

    # ============== 生命周期 ==============

    def close(self) -> None:
        """释放酒店持有的全部实体"""
        logger.info(
            f"Closing {self.name}: {len(self._rooms)} rooms, {len(self._guests)} guests, "
            f"{len(self._reservations)} active reservations"
        )
        self._reservations.clear()
        self._guests.clear()
        self._rooms.clear()


__all__ = ["Hotel"]

"""
hotel_desk/core/domain/reservation.py

Reservation 领域实体 - 绑定客人与房间，创建时锁定总价并占用房间
"""
from decimal import Decimal
import logging

from hotel_desk.core.domain.guest import GuestEntity
from hotel_desk.core.domain.room import RoomEntity

logger = logging.getLogger(__name__)


class ReservationEntity:
    """
    Reservation 领域实体

    只保存客人 ID 与房间号，由 Hotel 负责解析。总价在创建时计算，之后房价
    变动不会影响它。

    Attributes:
        _reservation_id: 预订 ID
        _guest_id: 客人 ID
        _room_number: 房间号
        _check_in_date: 入住日期（原样保存）
        _check_out_date: 离店日期（原样保存）
        _nights: 入住晚数
        _total_cost: 总价
    """

    def __init__(
        self,
        reservation_id: int,
        guest: GuestEntity,
        room: RoomEntity,
        check_in_date: str,
        check_out_date: str,
        nights: int,
    ):
        """
        创建预订：先计算总价，再占用房间

        Args:
            reservation_id: 预订 ID
            guest: 客人
            room: 房间
            check_in_date: 入住日期
            check_out_date: 离店日期
            nights: 入住晚数

        Raises:
            InvalidStayError: 晚数不是正整数
            RoomUnavailableError: 房间已被占用
        """
        # 计价在占用之前，计价失败时房间状态不变
        total_cost = room.cost(nights)
        room.book()

        self._reservation_id = reservation_id
        self._guest_id = guest.guest_id
        self._room_number = room.room_number
        self._check_in_date = check_in_date
        self._check_out_date = check_out_date
        self._nights = nights
        self._total_cost = total_cost

        logger.info(
            f"Reservation {reservation_id} created: guest {guest.guest_id}, "
            f"room {room.room_number}, {nights} night(s), total {total_cost}"
        )

    # ============== 属性访问 ==============

    @property
    def reservation_id(self) -> int:
        """预订 ID"""
        return self._reservation_id

    @property
    def guest_id(self) -> int:
        """客人 ID"""
        return self._guest_id

    @property
    def room_number(self) -> int:
        """房间号"""
        return self._room_number

    @property
    def check_in_date(self) -> str:
        """入住日期"""
        return self._check_in_date

    @property
    def check_out_date(self) -> str:
        """离店日期"""
        return self._check_out_date

    @property
    def nights(self) -> int:
        """入住晚数"""
        return self._nights

    @property
    def total_cost(self) -> Decimal:
        """总价"""
        return self._total_cost

    # ============== 序列化 ==============

    def to_dict(self) -> dict:
        """转换为字典"""
        return {
            "reservation_id": self._reservation_id,
            "guest_id": self._guest_id,
            "room_number": self._room_number,
            "check_in_date": self._check_in_date,
            "check_out_date": self._check_out_date,
            "nights": self._nights,
            "total_cost": self._total_cost,
        }

    def __repr__(self) -> str:
        return (
            f"ReservationEntity(reservation_id={self._reservation_id}, "
            f"guest_id={self._guest_id}, room_number={self._room_number})"
        )


__all__ = ["ReservationEntity"]

"""
hotel_desk/core/domain/room.py

Room 领域实体 - 房间身份、房价、占用状态与费用计算
"""
from typing import Union
from decimal import Decimal
from enum import Enum
import logging

from hotel_desk.core.engine.state_machine import StateMachine, StateMachineConfig, StateTransition
from hotel_desk.core.domain.exceptions import InvalidStayError, RoomUnavailableError

logger = logging.getLogger(__name__)

Money = Union[Decimal, int, str]

# 套房含早餐，按晚加收服务费
DEFAULT_SERVICE_FEE = Decimal("20")


# ============== 状态与房型定义 ==============

class RoomState(str):
    """房间状态"""
    AVAILABLE = "available"    # 空闲
    OCCUPIED = "occupied"      # 入住中


class RoomType(str, Enum):
    """房型"""
    STANDARD = "Standard"
    DELUXE = "Deluxe"
    SUITE = "Suite"

    @property
    def includes_breakfast(self) -> bool:
        """是否含早餐服务费"""
        return self is RoomType.SUITE


def to_money(value: Money) -> Decimal:
    """转换为金额，拒绝负数"""
    amount = value if isinstance(value, Decimal) else Decimal(str(value))
    if amount < 0:
        raise InvalidStayError(f"Amount must not be negative: {value}")
    return amount


# ============== 辅助函数 ==============

def _create_room_state_machine() -> StateMachine:
    """创建房间状态机"""
    return StateMachine(
        config=StateMachineConfig(
            name="Room",
            states=[RoomState.AVAILABLE, RoomState.OCCUPIED],
            transitions=[
                StateTransition(
                    from_state=RoomState.AVAILABLE,
                    to_state=RoomState.OCCUPIED,
                    trigger="book",
                ),
                StateTransition(
                    from_state=RoomState.OCCUPIED,
                    to_state=RoomState.AVAILABLE,
                    trigger="vacate",
                ),
            ],
            initial_state=RoomState.AVAILABLE,
        )
    )


# ============== Room 领域实体 ==============

class RoomEntity:
    """
    Room 领域实体

    房型决定计费方式：标准间与豪华间按晚计价，套房额外按晚收取服务费。

    Attributes:
        _room_number: 房间号，创建后不可变
        _room_type: 房型
        _price_per_night: 每晚房价
        _service_fee: 每晚服务费（非套房为 0）
        _state_machine: 状态机实例
    """

    def __init__(
        self,
        room_number: int,
        room_type: RoomType,
        price_per_night: Money,
        service_fee: Money = DEFAULT_SERVICE_FEE,
    ):
        """
        初始化 Room 实体

        Args:
            room_number: 房间号
            room_type: 房型
            price_per_night: 每晚房价
            service_fee: 套房每晚服务费，其他房型忽略
        """
        self._room_number = int(room_number)
        self._room_type = RoomType(room_type)
        self._price_per_night = to_money(price_per_night)
        self._service_fee = to_money(service_fee) if self._room_type.includes_breakfast else Decimal("0")
        self._state_machine = _create_room_state_machine()

    # ============== 属性访问 ==============

    @property
    def room_number(self) -> int:
        """房间号"""
        return self._room_number

    @property
    def room_type(self) -> RoomType:
        """房型"""
        return self._room_type

    @property
    def price_per_night(self) -> Decimal:
        """每晚房价"""
        return self._price_per_night

    @property
    def service_fee(self) -> Decimal:
        """每晚服务费"""
        return self._service_fee

    @property
    def status(self) -> str:
        """当前状态"""
        return self._state_machine.current_state

    # ============== 业务方法 ==============

    def cost(self, nights: int) -> Decimal:
        """
        计算住宿费用

        Args:
            nights: 入住晚数，必须为正整数

        Returns:
            总费用

        Raises:
            InvalidStayError: 晚数不是正整数
        """
        if isinstance(nights, bool) or not isinstance(nights, int) or nights < 1:
            raise InvalidStayError(f"Number of nights must be a positive integer, got {nights!r}")
        return self._price_per_night * nights + self._service_fee * nights

    def book(self) -> None:
        """
        占用房间

        Raises:
            RoomUnavailableError: 房间已被占用
        """
        if not self._state_machine.transition_to(RoomState.OCCUPIED, "book"):
            raise RoomUnavailableError(self._room_number)
        logger.info(f"Room {self._room_number} booked")

    def vacate(self) -> None:
        """释放房间，已空闲时不做任何事"""
        if self.is_occupied():
            self._state_machine.transition_to(RoomState.AVAILABLE, "vacate")
            logger.info(f"Room {self._room_number} is now available")

    def update_price(self, price_per_night: Money) -> None:
        """
        调整每晚房价，不影响已创建的预订

        Args:
            price_per_night: 新房价

        Raises:
            InvalidStayError: 房价为负数
        """
        old_price = self._price_per_night
        self._price_per_night = to_money(price_per_night)
        logger.info(f"Room {self._room_number} price changed: {old_price} -> {self._price_per_night}")

    # ============== 查询方法 ==============

    def is_available(self) -> bool:
        """检查房间是否空闲"""
        return self.status == RoomState.AVAILABLE

    def is_occupied(self) -> bool:
        """检查房间是否已入住"""
        return self.status == RoomState.OCCUPIED

    # ============== 序列化 ==============

    def describe(self, currency: str = "₹") -> str:
        """单行描述"""
        return (
            f"Room {self._room_number} | {self._room_type.value} | "
            f"{currency}{self._price_per_night}/night | "
            f"{'Available' if self.is_available() else 'Occupied'}"
        )

    def to_dict(self) -> dict:
        """转换为字典"""
        return {
            "room_number": self._room_number,
            "room_type": self._room_type.value,
            "price_per_night": self._price_per_night,
            "service_fee": self._service_fee,
            "status": self.status,
            "is_available": self.is_available(),
        }

    def __repr__(self) -> str:
        return f"RoomEntity(room_number={self._room_number}, room_type={self._room_type.value}, status={self.status})"


# 导出
__all__ = [
    "DEFAULT_SERVICE_FEE",
    "RoomState",
    "RoomType",
    "RoomEntity",
    "to_money",
]

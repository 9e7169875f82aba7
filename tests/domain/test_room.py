"""
测试 hotel_desk.core.domain.room 模块 - Room 领域实体单元测试
"""
import pytest
from decimal import Decimal

from hotel_desk.core.domain import (
    InvalidStayError,
    RoomEntity,
    RoomState,
    RoomType,
    RoomUnavailableError,
)


# ============== 计费 ==============

class TestRoomCost:
    def test_standard_cost(self, standard_room):
        """测试标准间按晚计价"""
        assert standard_room.cost(2) == Decimal("200")

    def test_deluxe_cost(self, deluxe_room):
        """测试豪华间按晚计价"""
        assert deluxe_room.cost(3) == Decimal("600")

    def test_suite_cost_includes_service_fee(self, suite_room):
        """测试套房加收每晚服务费"""
        assert suite_room.cost(3) == Decimal("1110")
        assert suite_room.cost(2) == Decimal("740")

    def test_service_fee_ignored_for_non_suite(self):
        """测试非套房不收服务费"""
        room = RoomEntity(102, RoomType.STANDARD, 100, service_fee=50)
        assert room.service_fee == Decimal("0")
        assert room.cost(1) == Decimal("100")

    @pytest.mark.parametrize("nights", [0, -1, 1.5, True])
    def test_cost_rejects_invalid_nights(self, standard_room, nights):
        """测试晚数必须为正整数"""
        with pytest.raises(InvalidStayError):
            standard_room.cost(nights)

    def test_price_accepts_int_and_str(self):
        """测试房价转换为 Decimal"""
        assert RoomEntity(1, RoomType.DELUXE, 200).price_per_night == Decimal("200")
        assert RoomEntity(2, RoomType.DELUXE, "199.50").price_per_night == Decimal("199.50")

    def test_negative_price_rejected(self):
        """测试房价不能为负"""
        with pytest.raises(InvalidStayError):
            RoomEntity(1, RoomType.STANDARD, -1)

    def test_update_price(self, standard_room):
        """测试调价"""
        standard_room.update_price(150)
        assert standard_room.price_per_night == Decimal("150")
        assert standard_room.cost(2) == Decimal("300")

        with pytest.raises(InvalidStayError):
            standard_room.update_price("-5")
        assert standard_room.price_per_night == Decimal("150")


# ============== 占用状态 ==============

class TestRoomOccupancy:
    def test_initially_available(self, standard_room):
        """测试新房间为空闲"""
        assert standard_room.status == RoomState.AVAILABLE
        assert standard_room.is_available() is True
        assert standard_room.is_occupied() is False

    def test_book(self, standard_room):
        """测试占用空闲房间"""
        standard_room.book()
        assert standard_room.status == RoomState.OCCUPIED
        assert standard_room.is_available() is False

    def test_book_occupied_room_fails(self, standard_room):
        """测试已占用房间不能再次占用"""
        standard_room.book()
        with pytest.raises(RoomUnavailableError) as exc_info:
            standard_room.book()
        assert exc_info.value.room_number == 101
        assert standard_room.is_occupied()

    def test_vacate(self, standard_room):
        """测试释放房间"""
        standard_room.book()
        standard_room.vacate()
        assert standard_room.is_available()

    def test_vacate_available_room(self, standard_room):
        """测试释放空闲房间仍为空闲"""
        standard_room.vacate()
        assert standard_room.is_available()

    def test_book_vacate_cycle(self, suite_room):
        """测试状态可循环"""
        for _ in range(3):
            suite_room.book()
            suite_room.vacate()
        assert suite_room.is_available()


# ============== 序列化 ==============

class TestRoomSerialization:
    def test_describe(self, standard_room):
        """测试单行描述"""
        assert standard_room.describe() == "Room 101 | Standard | ₹100/night | Available"
        standard_room.book()
        assert standard_room.describe("$") == "Room 101 | Standard | $100/night | Occupied"

    def test_to_dict(self, suite_room):
        """测试转换为字典"""
        data = suite_room.to_dict()
        assert data["room_number"] == 301
        assert data["room_type"] == "Suite"
        assert data["price_per_night"] == Decimal("350")
        assert data["service_fee"] == Decimal("20")
        assert data["status"] == RoomState.AVAILABLE
        assert data["is_available"] is True

    def test_room_type_from_value(self):
        """测试房型可由字符串构造"""
        room = RoomEntity(301, "Suite", 350)
        assert room.room_type is RoomType.SUITE
        assert room.room_type.includes_breakfast

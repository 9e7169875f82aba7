"""
测试初始数据、配置与输入校验模型
"""
import pytest
from decimal import Decimal
from pydantic import ValidationError

from hotel_desk.app.config import Settings
from hotel_desk.app.hotel.seed import SEED_INVENTORY, build_seed_rooms, create_hotel
from hotel_desk.app.models import GuestCreate, ReservationCreate
from hotel_desk.core.domain import RoomType


class TestSettings:
    def test_defaults(self, test_settings):
        """测试默认配置"""
        assert test_settings.HOTEL_NAME == "EVEREST HOTEL"
        assert test_settings.STANDARD_RATE == Decimal("100")
        assert test_settings.DELUXE_RATE == Decimal("200")
        assert test_settings.SUITE_RATE == Decimal("350")
        assert test_settings.SUITE_SERVICE_FEE == Decimal("20")

    def test_env_override(self, monkeypatch):
        """测试环境变量覆盖"""
        monkeypatch.setenv("HOTEL_NAME", "HARBOUR INN")
        monkeypatch.setenv("SUITE_SERVICE_FEE", "25")
        config = Settings(_env_file=None)
        assert config.HOTEL_NAME == "HARBOUR INN"
        assert config.SUITE_SERVICE_FEE == Decimal("25")

    def test_negative_rate_rejected(self):
        """测试房价不能为负"""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, STANDARD_RATE=Decimal("-1"))


class TestSeed:
    def test_inventory(self, test_settings):
        """测试初始房间数量、房型与房价"""
        rooms = build_seed_rooms(test_settings)
        assert len(rooms) == 12

        by_type = {}
        for room in rooms:
            by_type.setdefault(room.room_type, []).append(room)

        assert [r.room_number for r in by_type[RoomType.STANDARD]] == [101, 102, 103]
        assert [r.room_number for r in by_type[RoomType.DELUXE]] == [201, 202, 203, 204]
        assert [r.room_number for r in by_type[RoomType.SUITE]] == [301, 302, 303, 304, 305]
        assert {r.price_per_night for r in by_type[RoomType.STANDARD]} == {Decimal("100")}
        assert {r.price_per_night for r in by_type[RoomType.DELUXE]} == {Decimal("200")}
        assert {r.price_per_night for r in by_type[RoomType.SUITE]} == {Decimal("350")}
        assert all(r.is_available() for r in rooms)

    def test_inventory_table_covers_all_types(self):
        """测试每种房型都有初始房间"""
        assert {room_type for room_type, _ in SEED_INVENTORY} == set(RoomType)

    def test_service_fee_from_settings(self):
        """测试套房服务费取自配置"""
        config = Settings(_env_file=None, SUITE_SERVICE_FEE=Decimal("30"))
        hotel = create_hotel(config)
        assert hotel.get_room(305).cost(2) == Decimal("760")
        assert hotel.get_room(101).cost(2) == Decimal("200")

    def test_hotel_name(self, test_settings):
        """测试酒店名称"""
        assert create_hotel(test_settings).name == "EVEREST HOTEL"
        assert create_hotel(test_settings, name="HARBOUR INN").name == "HARBOUR INN"


class TestSchemas:
    def test_guest_create_strips(self):
        """测试登记信息去除空白"""
        data = GuestCreate(name="  Alice ", phone=" 111", email="a@x.com ")
        assert data.model_dump() == {"name": "Alice", "phone": "111", "email": "a@x.com"}

    def test_reservation_create_coerces_numbers(self):
        """测试数字字符串转换"""
        data = ReservationCreate(
            room_number="301", guest_id="1", check_in_date="01/05/2026",
            check_out_date="03/05/2026", nights="2",
        )
        assert data.room_number == 301
        assert data.guest_id == 1
        assert data.nights == 2

    @pytest.mark.parametrize("nights", ["0", "-3", "two", ""])
    def test_reservation_create_rejects_bad_nights(self, nights):
        """测试晚数必须为正整数"""
        with pytest.raises(ValidationError):
            ReservationCreate(
                room_number=301, guest_id=1, check_in_date="a",
                check_out_date="b", nights=nights,
            )

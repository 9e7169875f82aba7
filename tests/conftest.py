"""
Pytest 配置和共享 fixtures
"""
import pytest
from decimal import Decimal

from hotel_desk.app.config import Settings
from hotel_desk.app.hotel.seed import create_hotel
from hotel_desk.core.domain import Hotel, RoomEntity, RoomType


@pytest.fixture
def test_settings():
    """不读取 .env 的默认配置"""
    return Settings(_env_file=None)


@pytest.fixture
def hotel(test_settings):
    """带初始房间的酒店"""
    with create_hotel(test_settings) as h:
        yield h


@pytest.fixture
def alice(hotel):
    """已登记的客人 Alice"""
    return hotel.register_guest("Alice", "111", "a@x.com")


# ============== 房间 Fixtures ==============

@pytest.fixture
def standard_room():
    return RoomEntity(101, RoomType.STANDARD, Decimal("100"))


@pytest.fixture
def deluxe_room():
    return RoomEntity(201, RoomType.DELUXE, Decimal("200"))


@pytest.fixture
def suite_room():
    return RoomEntity(301, RoomType.SUITE, Decimal("350"), service_fee=Decimal("20"))


@pytest.fixture
def small_hotel(standard_room, suite_room):
    """只有两间房的酒店"""
    return Hotel("TEST HOTEL", [standard_room, suite_room])

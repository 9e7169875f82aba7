"""
初始化房间数据
标准间 101-103、豪华间 201-204、套房 301-305，房价取自配置
"""
from typing import List, Optional
import logging

from hotel_desk.app.config import Settings, settings
from hotel_desk.core.domain import Hotel, RoomEntity, RoomType

logger = logging.getLogger(__name__)

# 房型 -> 房间号范围
SEED_INVENTORY = (
    (RoomType.STANDARD, range(101, 104)),
    (RoomType.DELUXE, range(201, 205)),
    (RoomType.SUITE, range(301, 306)),
)


def build_seed_rooms(config: Optional[Settings] = None) -> List[RoomEntity]:
    """按房型、房间号升序生成初始房间"""
    config = config or settings
    rates = {
        RoomType.STANDARD: config.STANDARD_RATE,
        RoomType.DELUXE: config.DELUXE_RATE,
        RoomType.SUITE: config.SUITE_RATE,
    }

    return [
        RoomEntity(
            room_number=number,
            room_type=room_type,
            price_per_night=rates[room_type],
            service_fee=config.SUITE_SERVICE_FEE,
        )
        for room_type, numbers in SEED_INVENTORY
        for number in numbers
    ]


def create_hotel(config: Optional[Settings] = None, name: Optional[str] = None) -> Hotel:
    """创建带初始房间的酒店"""
    config = config or settings
    hotel = Hotel(name or config.HOTEL_NAME, build_seed_rooms(config))
    logger.info(f"Initialized {len(hotel.list_all_rooms())} rooms for {hotel.name}")
    return hotel

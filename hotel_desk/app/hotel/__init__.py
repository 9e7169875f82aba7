"""
Hotel 应用层 - 初始数据
"""
from hotel_desk.app.hotel.seed import SEED_INVENTORY, build_seed_rooms, create_hotel

__all__ = ["SEED_INVENTORY", "build_seed_rooms", "create_hotel"]

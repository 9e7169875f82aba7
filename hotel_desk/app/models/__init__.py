"""
控制台输入校验模型
"""
from hotel_desk.app.models.schemas import GuestCreate, ReservationCreate

__all__ = ["GuestCreate", "ReservationCreate"]

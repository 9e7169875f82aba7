"""
Console input schemas for guest registration and reservation creation.
"""
from pydantic import BaseModel, ConfigDict, Field


# ============== 客人 Schemas ==============

class GuestCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str
    phone: str = ""
    email: str = ""


# ============== 预订 Schemas ==============

class ReservationCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    room_number: int
    guest_id: int
    check_in_date: str = Field(..., description="DD/MM/YYYY，原样保存")
    check_out_date: str = Field(..., description="DD/MM/YYYY，原样保存")
    nights: int = Field(..., gt=0)

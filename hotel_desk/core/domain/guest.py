"""
hotel_desk/core/domain/guest.py

Guest 领域实体 - 客人身份与联系方式
"""
from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class GuestEntity:
    """
    Guest 领域实体

    ID 由酒店在登记时分配，不校验手机号和邮箱格式。
    """

    guest_id: int
    name: str
    phone: str
    email: str

    def describe(self) -> str:
        """单行描述"""
        return f"Guest ID: {self.guest_id} | {self.name} | {self.phone} | {self.email}"

    def to_dict(self) -> dict:
        """转换为字典"""
        return asdict(self)


__all__ = ["GuestEntity"]

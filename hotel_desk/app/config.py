"""
应用配置
从环境变量和 .env 文件读取配置
"""
from decimal import Decimal
from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """应用设置"""

    # 应用基础配置
    APP_NAME: str = "hotel-desk"
    HOTEL_NAME: str = "EVEREST HOTEL"
    LOG_LEVEL: str = "WARNING"
    CURRENCY_SYMBOL: str = "₹"

    # 房价配置（每晚）
    STANDARD_RATE: Decimal = Field(default=Decimal("100"), ge=0)
    DELUXE_RATE: Decimal = Field(default=Decimal("200"), ge=0)
    SUITE_RATE: Decimal = Field(default=Decimal("350"), ge=0)

    # 套房早餐服务费（每晚）
    SUITE_SERVICE_FEE: Decimal = Field(default=Decimal("20"), ge=0)

    model_config = ConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# 全局设置实例
settings = Settings()

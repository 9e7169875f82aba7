"""
hotel_desk/core - 领域核心（实体、聚合根、状态机）
"""

"""
hotel-desk - 单店酒店前台管理控制台
"""
__version__ = "0.1.0"

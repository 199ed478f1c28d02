"""Configuration module"""

from .settings import Config, DevelopmentConfig, TestingConfig, ProductionConfig, get_config

__all__ = ["Config", "DevelopmentConfig", "TestingConfig", "ProductionConfig", "get_config"]

"""
Configuration Management Module
Environment-driven settings for generation runs, providers and the server
"""
from .settings import (
    GeneratorSettings,
    LLMSettings,
    ServerSettings,
    Settings,
    get_settings,
    get_generator_settings,
    get_llm_settings,
    get_server_settings,
)

__all__ = [
    "GeneratorSettings",
    "LLMSettings",
    "ServerSettings",
    "Settings",
    "get_settings",
    "get_generator_settings",
    "get_llm_settings",
    "get_server_settings",
]

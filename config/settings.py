"""
Settings Configuration
Pydantic-based configuration loading and validation
"""
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

from core import ImagePolicy, ImagePolicyKind, PipelineConfig


class GeneratorSettings(BaseSettings):
    """Generation run settings"""
    names_source: str = Field(default="names.json", description="JSON array of subject names")
    archive_path: str = Field(default="docs/news.json", description="Archive JSON read by the viewer")
    images_dir: str = Field(default="docs/images", description="Directory for generated images")
    max_items: int = Field(default=200, ge=1, description="Archive length cap")
    text_concurrency: int = Field(default=3, ge=1, description="Text requests in flight")
    image_policy: ImagePolicyKind = Field(default=ImagePolicyKind.FIXED_QUOTA, description="none, probability, fixed_quota")
    image_probability: float = Field(default=0.2, ge=0.0, le=1.0, description="Per-item chance for the probability policy")
    max_images_per_run: int = Field(default=1, ge=0, description="Quota for the fixed_quota policy")
    image_size: str = Field(default="1024x1024", description="Image size passed to the provider")

    class Config:
        env_prefix = "GENERATOR_"

    def build_image_policy(self) -> ImagePolicy:
        if self.image_policy == ImagePolicyKind.PROBABILITY:
            return ImagePolicy.with_probability(self.image_probability)
        if self.image_policy == ImagePolicyKind.FIXED_QUOTA:
            return ImagePolicy.fixed_quota(self.max_images_per_run)
        return ImagePolicy.disabled()

    def to_pipeline_config(self) -> PipelineConfig:
        return PipelineConfig(
            names_source=Path(self.names_source),
            archive_path=Path(self.archive_path),
            images_dir=Path(self.images_dir),
            max_items=self.max_items,
            text_concurrency=self.text_concurrency,
            image_policy=self.build_image_policy(),
            image_size=self.image_size,
        )


class LLMSettings(BaseSettings):
    """Generative provider settings"""
    provider: str = Field(default="openai", description="Provider name (openai)")
    text_model: Optional[str] = Field(default=None, description="Text model (provider default when unset)")
    image_model: Optional[str] = Field(default=None, description="Image model (provider default when unset)")
    timeout: float = Field(default=60.0, description="Text request timeout (seconds)")
    image_timeout: float = Field(default=120.0, description="Image request timeout (seconds)")
    base_url: Optional[str] = Field(default=None, description="Custom API base URL")

    openai_api_key: Optional[str] = Field(default=None, description="OpenAI API Key")

    class Config:
        env_prefix = "LLM_"


class ServerSettings(BaseSettings):
    """Booking API / static viewer server"""
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=3000)
    bookings_path: str = Field(default="bookings.json")
    static_dir: str = Field(default="docs")

    class Config:
        env_prefix = "SERVER_"


class Settings(BaseSettings):
    """Root settings aggregating all sections"""

    generator: GeneratorSettings = Field(default_factory=GeneratorSettings)
    llm: LLMSettings = Field(default_factory=LLMSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @classmethod
    def load_from_env_file(cls, env_path: Optional[Path] = None) -> "Settings":
        """Load settings, reading ``config/.env`` first when it exists."""
        if env_path is None:
            env_path = Path(__file__).parent / ".env"

        if env_path.exists():
            from dotenv import load_dotenv
            load_dotenv(env_path)

        return cls(
            generator=GeneratorSettings(),
            llm=LLMSettings(),
            server=ServerSettings(),
        )


@lru_cache()
def get_settings() -> Settings:
    """Cached settings singleton"""
    return Settings.load_from_env_file()


def get_generator_settings() -> GeneratorSettings:
    return get_settings().generator


def get_llm_settings() -> LLMSettings:
    return get_settings().llm


def get_server_settings() -> ServerSettings:
    return get_settings().server

"""App settings and config loader."""

from functools import lru_cache
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
	# Server
	HOST: str = Field(default="0.0.0.0")
	PORT: int = Field(default=3000, ge=0, le=65535)

	# App
	APP_TITLE: str = Field(default="Pipeline Demo API")
	LOG_LEVEL: str = Field(default="INFO")
	DEBUG: bool = Field(default=False)

	model_config = SettingsConfigDict(
		env_file=".env",
		env_file_encoding="utf-8",
		case_sensitive=False,
		env_ignore_empty=True,
		extra="ignore",
		frozen=True,
	)

	@field_validator("LOG_LEVEL")
	@classmethod
	def normalize_log_level(cls, value: str) -> str:
		"""Accept any casing of a stdlib logging level name."""
		level = value.strip().upper()
		if level not in LOG_LEVELS:
			raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
		return level

	def base_url(self, port: Optional[int] = None) -> str:
		"""Return the local URL the server answers on."""
		return f"http://localhost:{self.PORT if port is None else port}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
	"""Return cached settings instance."""
	return Settings()

"""
Configuration management using Pydantic Settings.

Environment variables are loaded from .env file or system environment.
"""

from urllib.parse import quote

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Main application settings"""

    # Database Configuration
    db_host: str = Field(default="localhost:6379", description="Document store host[:port]")
    db_user: str = Field(default="", description="Document store user")
    db_pass: str = Field(default="", description="Document store password")
    db_name: str = Field(default="aeronaves", description="Collection namespace for stored records")

    # Server Configuration
    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=4000, description="Server port")
    reload: bool = Field(default=False, description="Enable auto-reload in development")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def database_url(self) -> str:
        """Connection URL assembled from the db_* settings"""
        credentials = ""
        if self.db_user or self.db_pass:
            credentials = quote(self.db_user, safe="")
            if self.db_pass:
                credentials += f":{quote(self.db_pass, safe='')}"
            credentials += "@"
        return f"redis://{credentials}{self.db_host}"


# Singleton instance
settings = Settings()

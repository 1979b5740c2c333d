from typing import Literal

from pydantic import BaseModel

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]

host = "127.0.0.1"
port = 8448
log_level: LogLevel = "DEBUG"


class ServerSettings(BaseModel):
    """Represents the settings for the HTTP server."""

    host: str = host
    port: int = port
    log_level: LogLevel = log_level


settings_model = ServerSettings()

from pydantic import BaseModel
import os
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# Load .env file if it exists (before reading os.getenv)
_env_path = Path(__file__).resolve().parent.parent / ".env"
if _env_path.exists():
    with open(_env_path) as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                key, _, value = line.partition("=")
                key = key.strip()
                value = value.strip().strip('"').strip("'")
                # Only set if not already in environment (env vars take precedence)
                if key not in os.environ:
                    os.environ[key] = value


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    # Network
    host: str = os.getenv("MCP_HOST", "0.0.0.0")
    port: int = int(os.getenv("MCP_PORT", "3000"))
    base_path: str = os.getenv("MCP_BASE_PATH", "").rstrip("/")

    # Open-Meteo upstreams (no key required on the free tier)
    geocoding_url: str = os.getenv("GEOCODING_URL", "https://geocoding-api.open-meteo.com/v1/search")
    geocoding_api_key: str = os.getenv("GEOCODING_API_KEY", "")
    forecast_url: str = os.getenv("FORECAST_URL", "https://api.open-meteo.com/v1/forecast")
    temperature_unit: str = os.getenv("TEMPERATURE_UNIT", "fahrenheit")
    forecast_hours: int = int(os.getenv("FORECAST_HOURS", "24"))
    http_timeout_s: float = float(os.getenv("HTTP_TIMEOUT", "10"))

    # Logging
    verbose_logs: bool = _env_bool("MCP_VERBOSE_LOGS", "true")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

settings = Settings()

_geo_key = '***' + settings.geocoding_api_key[-4:] if len(settings.geocoding_api_key) > 4 else 'EMPTY'
logger.info(f"Config: geocoding → {settings.geocoding_url} (key={_geo_key})")
logger.info(f"Config: forecast → {settings.forecast_url}, unit={settings.temperature_unit}")

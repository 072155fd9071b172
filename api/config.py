import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class Settings(BaseModel):
    """Runtime configuration read from the environment (.env supported)."""
    database_url: Optional[str] = None  # unset -> clubs kept in memory
    cors_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        origins = os.environ.get("CADDIE_CORS_ORIGINS")
        return cls(
            database_url=os.environ.get("DATABASE_URL") or None,
            cors_origins=(
                [o.strip() for o in origins.split(",") if o.strip()]
                if origins else ["http://localhost:5173"]
            ),
            log_level=os.environ.get("CADDIE_LOG_LEVEL", "INFO").upper(),
        )

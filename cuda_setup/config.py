"""Runtime settings for upstream endpoints and the HTTP client."""

import os

from pydantic import BaseModel, ConfigDict

DOWNLOAD_BASE_URL = "https://developer.download.nvidia.com/compute/cuda"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    download_base_url: str = DOWNLOAD_BASE_URL
    redistrib_url: str = f"{DOWNLOAD_BASE_URL}/redist/"
    archive_url: str = "https://developer.nvidia.com/cuda-toolkit-archive"
    opensource_url: str = f"{DOWNLOAD_BASE_URL}/opensource/"
    user_agent: str = "setup-cuda"
    timeout: float = 60.0

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings, letting SETUP_CUDA_* environment variables override defaults."""
        overrides = {}
        for field in cls.model_fields:
            value = os.environ.get(f"SETUP_CUDA_{field.upper()}", "").strip()
            if value:
                overrides[field] = value
        return cls(**overrides)

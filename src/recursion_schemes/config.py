import os
from typing import Literal

from pydantic import BaseModel


class Settings(BaseModel):
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    fuse_hylo: bool = True

    @classmethod
    def load(cls) -> "Settings":
        values = {}

        log_level = os.getenv("RECURSION_SCHEMES_LOG_LEVEL")
        if log_level is not None:
            values["log_level"] = log_level.upper()

        fuse_hylo = os.getenv("RECURSION_SCHEMES_FUSE_HYLO")
        if fuse_hylo is not None:
            values["fuse_hylo"] = fuse_hylo

        return cls(**values)


settings = Settings.load()

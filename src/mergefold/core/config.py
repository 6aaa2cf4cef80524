import os

from pydantic import BaseModel, Field

from .types import MAX_RANK


class Settings(BaseModel):
    MAX_RANK: int = Field(MAX_RANK, ge=0, le=MAX_RANK)

    @classmethod
    def load(cls) -> "Settings":
        max_rank = os.getenv("MERGEFOLD_MAX_RANK")

        return cls(
            MAX_RANK=max_rank or MAX_RANK,
        )


settings = Settings.load()

"""
src/data/models.py
──────────────────
Pydantic v2 data models for user preferences and storage results.
"""

from pydantic import BaseModel, ConfigDict, Field

from config.languages import DEFAULT_LANGUAGE


class Preference(BaseModel):
    """
    Snapshot of the user's display preferences.

    Frozen: a change produces a new instance, so readers holding a snapshot
    never see a half-applied update.
    """

    model_config = ConfigDict(frozen=True)

    language_code: str = Field(default=DEFAULT_LANGUAGE, min_length=1)
    is_muted: bool = False


class StorageResult(BaseModel):
    """Outcome of a single durable-storage operation."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    value: str | None = None
    error: str | None = None

    @classmethod
    def success(cls, value: str | None = None) -> "StorageResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "StorageResult":
        return cls(ok=False, error=error)

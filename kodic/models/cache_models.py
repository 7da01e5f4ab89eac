"""Pydantic models for cache-related data structures"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class CacheEntry(BaseModel):
    """A remembered lookup"""

    term: str = Field(description="Looked-up word, unique key")
    definition: str = Field(description="Cleaned, numbered definition")
    created_at: datetime = Field(
        default_factory=datetime.now, description="Creation timestamp"
    )
    reviewed: bool = Field(default=False, description="Marked as reviewed")

    @field_validator("term")
    @classmethod
    def validate_term(cls, v: str) -> str:
        """Validate cache key"""
        if not v or not v.strip():
            raise ValueError("Cache term cannot be empty")
        return v.strip().lower()

    @field_validator("definition")
    @classmethod
    def validate_definition(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Definition cannot be empty")
        return v


class CacheStats(BaseModel):
    """Model for cache statistics"""

    total_entries: int = Field(description="Total number of entries")
    reviewed_entries: int = Field(description="Entries marked as reviewed")
    hits: int = Field(default=0, description="Lookups served from the store")
    misses: int = Field(default=0, description="Lookups not found in the store")
    hit_rate: float = Field(default=0.0, description="Cache hit rate percentage")

    @field_validator("hit_rate")
    @classmethod
    def validate_hit_rate(cls, v: float) -> float:
        """Validate hit rate percentage"""
        if not 0 <= v <= 100:
            raise ValueError("Hit rate must be between 0 and 100")
        return v

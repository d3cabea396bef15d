"""Database models."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from flashdeck.database import Base


class Generation(Base):
    """One call to the language model, kept for analytics and the daily quota."""

    __tablename__ = "generations"

    # UUIDs stored as strings so the table works on SQLite and PostgreSQL alike
    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    user_id: Mapped[str] = mapped_column(String(36), index=True, nullable=False)
    model: Mapped[str] = mapped_column(String(100), nullable=False)
    source_text_length: Mapped[int] = mapped_column(Integer, nullable=False)
    source_text_hash: Mapped[str] = mapped_column(String(64), index=True, nullable=False)
    generated_count: Mapped[int] = mapped_column(Integer, nullable=False)
    generation_duration_ms: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), index=True, nullable=False
    )

    def __repr__(self) -> str:
        """String representation of Generation."""
        return f"<Generation(id={self.id}, user_id={self.user_id}, count={self.generated_count})>"

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from playlist_api.models.base import Base


class User(Base):
    """Read-only mapping; users are managed by the authentication module."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    username: Mapped[str] = mapped_column(String, unique=True, nullable=False)
    fullname: Mapped[str | None] = mapped_column(String, nullable=True)

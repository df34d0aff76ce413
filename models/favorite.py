from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from models.base_model import Base


class Favorite(Base):
    """
    One favorited country per row. The unique (user_id, country_code) pair
    is what keeps an account's favorites a set; the integer id keeps
    insertion order.
    """
    __tablename__ = "favorites"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    country_code = Column(String(8), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    user = relationship("User", back_populates="favorite_rows")

    __table_args__ = (
        UniqueConstraint("user_id", "country_code", name="uq_favorites_user_country"),
    )

    def __repr__(self):
        return f"<Favorite user={self.user_id} code={self.country_code}>"

from models.base_model import Base, BaseModel
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship


class User(BaseModel, Base):
    __tablename__ = "users"
    username = Column(String(64), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)

    favorite_rows = relationship(
        "Favorite",
        back_populates="user",
        order_by="Favorite.id",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def favorites(self) -> list[str]:
        """Favorited country codes in insertion order."""
        return [row.country_code for row in self.favorite_rows]

from services.accounts import AccountStore
from services.favorites import FavoritesManager

__all__ = ["AccountStore", "FavoritesManager"]

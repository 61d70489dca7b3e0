from .login_api import LoginApi
from .users_api import UsersApi
from .items_api import ItemsApi
from .ratings_api import RatingsApi
from .recommendations_api import RecommendationsApi
from .interactions_api import InteractionsApi

__all__ = [
    "LoginApi",
    "UsersApi",
    "ItemsApi",
    "RatingsApi",
    "RecommendationsApi",
    "InteractionsApi",
]

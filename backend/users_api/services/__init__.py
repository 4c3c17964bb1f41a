from users_api.services.user_lookup import UserLookupGateway
from users_api.services.seed import seed_default_users, DEFAULT_USERS

__all__ = [
    "UserLookupGateway",
    "seed_default_users",
    "DEFAULT_USERS",
]

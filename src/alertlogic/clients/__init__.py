from .accounts import AccountsClient as AccountsClient
from .assets_query import AssetsQueryClient as AssetsQueryClient
from .assets_write import AssetsWriteClient as AssetsWriteClient
from .deployments import DeploymentsClient as DeploymentsClient
from .roles import RolesClient as RolesClient
from .user_roles import UserRolesClient as UserRolesClient
from .users import UsersClient as UsersClient

__all__ = [
    "AccountsClient",
    "AssetsQueryClient",
    "AssetsWriteClient",
    "DeploymentsClient",
    "RolesClient",
    "UserRolesClient",
    "UsersClient",
]

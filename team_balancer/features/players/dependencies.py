"""Dependencies for the players feature.

Wires the shared Riot API client into the role inferencer and player service.
"""

from typing import Annotated
from fastapi import Depends

from team_balancer.algorithms.role_inference import RoleInferencer
from team_balancer.core.config import get_global_settings
from team_balancer.core.dependencies import RiotClientDep
from .service import PlayerService


def get_role_inferencer(riot_client: RiotClientDep) -> RoleInferencer:
    """Get a role inferencer sampling the configured number of matches.

    :param riot_client: Shared Riot API client
    :returns: Role inferencer
    """
    settings = get_global_settings()
    return RoleInferencer(riot_client, sample_size=settings.role_sample_size)


def get_player_service(
    riot_client: RiotClientDep,
    role_inferencer: Annotated[RoleInferencer, Depends(get_role_inferencer)],
) -> PlayerService:
    """Get player service instance.

    :param riot_client: Shared Riot API client
    :param role_inferencer: Role inferencer
    :returns: Player service with injected dependencies
    """
    return PlayerService(riot_client, role_inferencer)


# Type aliases for cleaner dependency injection
PlayerServiceDep = Annotated[PlayerService, Depends(get_player_service)]

__all__ = ["get_role_inferencer", "get_player_service", "PlayerServiceDep"]

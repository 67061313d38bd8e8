"""Player lookup feature: identity resolution, rank scoring and role inference."""

from .router import router
from .service import PlayerService, normalize_handle

__all__ = ["router", "PlayerService", "normalize_handle"]

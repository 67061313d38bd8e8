"""Team split feature."""

from .router import router
from .service import TeamSplitService

__all__ = ["router", "TeamSplitService"]

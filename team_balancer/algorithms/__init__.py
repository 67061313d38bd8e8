"""
Scoring and balancing algorithms.

This package contains the rank scorer, the role inferencer and the team
split policies used by the player and team features.
"""

from .rank_score import score_rank_entry, best_rank_entry
from .role_inference import RoleInferencer, pick_majority_role
from .team_split import TeamSplit, split_teams, split_balanced, split_duo, split_random

__all__ = [
    "score_rank_entry",
    "best_rank_entry",
    "RoleInferencer",
    "pick_majority_role",
    "TeamSplit",
    "split_teams",
    "split_balanced",
    "split_duo",
    "split_random",
]

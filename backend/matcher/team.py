"""
Team assembly from scored candidates.

Selection runs in two passes over the ranked list: one candidate per primary
role first, then any remaining slots in pure score order. Every step returns
a new tuple and leaves its input untouched.
"""

import logging
from typing import Iterable, Sequence, Tuple

from .models import ScoredCandidate

logger = logging.getLogger(__name__)

Team = Tuple[ScoredCandidate, ...]


def rank_candidates(scored: Iterable[ScoredCandidate]) -> Team:
    """
    Order candidates by score, highest first.
    
    Equal scores are ordered by candidate id ascending (compared as strings).
    """
    return tuple(sorted(scored, key=lambda c: (-c.score, str(c.candidate.id))))


def select_role_diverse(ranked: Sequence[ScoredCandidate], team_size: int) -> Team:
    """
    First pass: admit at most one candidate per primary role.
    
    Args:
        ranked: Candidates in ranking order
        team_size: Maximum team size
        
    Returns:
        Selected candidates in ranking order
    """
    team = []
    used_roles = set()
    used_ids = set()
    for candidate in ranked:
        if len(team) >= team_size:
            break
        role = candidate.candidate.primary_role
        if role in used_roles or candidate.candidate.id in used_ids:
            continue
        team.append(candidate)
        used_roles.add(role)
        used_ids.add(candidate.candidate.id)
    return tuple(team)


def fill_remaining(ranked: Sequence[ScoredCandidate], team: Sequence[ScoredCandidate], team_size: int) -> Team:
    """
    Second pass: top up the team from the ranked list, ignoring roles.
    
    Args:
        ranked: Candidates in ranking order
        team: Members already selected
        team_size: Maximum team size
        
    Returns:
        The given members followed by the added ones
    """
    filled = list(team)
    used_ids = {member.candidate.id for member in team}
    for candidate in ranked:
        if len(filled) >= team_size:
            break
        if candidate.candidate.id in used_ids:
            continue
        filled.append(candidate)
        used_ids.add(candidate.candidate.id)
    return tuple(filled)


def assemble_team(scored: Iterable[ScoredCandidate], team_size: int) -> Team:
    """
    Build a role-diverse team of at most team_size members.
    
    Args:
        scored: Scored candidates in any order
        team_size: Requested team size; zero or negative yields an empty team
        
    Returns:
        Team members, role-diverse picks first, then score-order fill
    """
    if team_size <= 0:
        return ()
    
    ranked = rank_candidates(scored)
    team = select_role_diverse(ranked, team_size)
    diverse_count = len(team)
    if len(team) < team_size:
        team = fill_remaining(ranked, team, team_size)
    
    logger.debug(
        f"Assembled team of {len(team)}/{team_size} "
        f"({diverse_count} role-diverse, {len(team) - diverse_count} filled)"
    )
    return team

"""
Team generation pipeline.

Coordinates signal extraction, TF-IDF vectorization, budget filtering,
scoring and team assembly for one project and one candidate pool.

Features:
- Pure computation: no I/O, no state kept between calls
- IDF table fully built before any candidate is vectorized
- Optional parallel scoring with ThreadPoolExecutor for large pools
- Explicit NO_ELIGIBLE_CANDIDATES status when nobody survives filtering
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union
import logging

from .budget import passes_budget
from .engine import ScoringEngine
from .extractor import SignalExtractor
from .models import (
    STATUS_NO_ELIGIBLE,
    STATUS_OK,
    ProfessionalProfile,
    ProfileId,
    ProjectInput,
    ScoredCandidate,
    TeamResult,
)
from .team import assemble_team
from .text import tokenize
from .tfidf import build_idf, vectorize
from config import MatchingConfig, load_config

logger = logging.getLogger(__name__)

ProjectLike = Union[ProjectInput, Mapping[str, Any]]
ProfileLike = Union[ProfessionalProfile, Mapping[str, Any]]


def _as_project(project: ProjectLike) -> ProjectInput:
    if isinstance(project, ProjectInput):
        return project
    return ProjectInput.from_dict(project)


def _as_profiles(candidates: Iterable[ProfileLike]) -> List[ProfessionalProfile]:
    """Convert caller records to profiles and reject duplicate ids."""
    profiles = [
        c if isinstance(c, ProfessionalProfile) else ProfessionalProfile.from_dict(c)
        for c in candidates
    ]
    seen = set()
    for profile in profiles:
        if profile.id in seen:
            raise ValueError(f"Duplicate candidate id in pool: {profile.id!r}")
        seen.add(profile.id)
    return profiles


class MatchingPipeline:
    """
    Generates role-diverse teams for projects.
    
    One instance can serve any number of calls; it holds only the
    configuration and the stateless extractor and scoring engine.
    """
    
    def __init__(self, config: Optional[MatchingConfig] = None):
        """
        Initialize pipeline.
        
        Args:
            config: MatchingConfig; the bundled defaults are loaded when omitted
        """
        self.config = config if config is not None else load_config()
        self.extractor = SignalExtractor(self.config)
        self.engine = ScoringEngine(self.config, self.extractor)
        self.max_workers = self.config.pipeline.max_workers
        self.parallel_threshold = self.config.pipeline.parallel_threshold
        self._stopwords = frozenset(self.config.tokenizer.stopwords)
    
    def _tokenize(self, text: str) -> List[str]:
        return tokenize(text, self._stopwords, self.config.tokenizer.min_token_length)
    
    def generate_team(
        self,
        project: ProjectLike,
        candidates: Iterable[ProfileLike],
        team_size: Optional[int] = None
    ) -> TeamResult:
        """
        Score a candidate pool against a project and assemble a team.
        
        Args:
            project: ProjectInput or project document
            candidates: Professionals (or documents) already filtered to the
                caller's baseline eligibility, ids unique within the pool
            team_size: Maximum team size (default: configured default size)
            
        Returns:
            TeamResult; status is NO_ELIGIBLE_CANDIDATES when the pool is
            empty or nobody passes the budget filter
            
        Raises:
            TypeError: If a record is not a mapping
            ValueError: If a record is malformed or ids repeat
        """
        project = _as_project(project)
        profiles = _as_profiles(candidates)
        if team_size is None:
            team_size = self.config.pipeline.default_team_size
        
        project_signals = self.extractor.extract_all(project.description)
        
        # Corpus: every candidate summary, then the project description
        candidate_tokens = [self._tokenize(p.professional_summary) for p in profiles]
        project_tokens = self._tokenize(project.description)
        idf = build_idf(candidate_tokens + [project_tokens])
        project_vector = vectorize(project_tokens, idf)
        
        eligible = [
            (profile, tokens)
            for profile, tokens in zip(profiles, candidate_tokens)
            if passes_budget(profile, project.budget_range, self.config.budget)
        ]
        
        if not eligible:
            logger.warning(
                f"No eligible candidates: pool={len(profiles)} "
                f"budget_range={project.budget_range}"
            )
            return TeamResult(
                status=STATUS_NO_ELIGIBLE,
                team=(),
                project_signals=project_signals,
                eligible_count=0,
                total_count=len(profiles)
            )
        
        def score_one(item) -> ScoredCandidate:
            profile, tokens = item
            return self.engine.score(
                profile, project, project_signals, project_vector, idf, tokens
            )
        
        if len(eligible) >= self.parallel_threshold and self.max_workers > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                scored = list(executor.map(score_one, eligible))
        else:
            scored = [score_one(item) for item in eligible]
        
        team = assemble_team(scored, team_size)
        
        logger.info(
            f"Generated team size={len(team)}/{team_size} "
            f"eligible={len(eligible)}/{len(profiles)} "
            f"signals={project_signals.to_dict()}"
        )
        
        return TeamResult(
            status=STATUS_OK,
            team=team,
            project_signals=project_signals,
            eligible_count=len(eligible),
            total_count=len(profiles)
        )
    
    def find_replacements(
        self,
        project: ProjectLike,
        candidates: Iterable[ProfileLike],
        roles: Sequence[str],
        exclude_ids: Iterable[ProfileId] = ()
    ) -> Dict[str, ScoredCandidate]:
        """
        Pick the best candidate for each requested role.
        
        Each role is matched on its own sub-pool of candidates with that
        primary role. Excluded ids and candidates already picked for an
        earlier role are skipped.
        
        Args:
            project: ProjectInput or project document
            candidates: Full candidate pool
            roles: Roles to fill, in priority order
            exclude_ids: Ids that must not be picked (e.g. current members)
            
        Returns:
            Mapping of role to picked candidate; roles with no eligible
            candidate are omitted
            
        Raises:
            ValueError: If more roles are requested than max_role_swaps allows
        """
        wanted = list(dict.fromkeys(roles))
        max_swaps = self.config.pipeline.max_role_swaps
        if len(wanted) > max_swaps:
            raise ValueError(
                f"Too many roles requested: {len(wanted)} (maximum {max_swaps})"
            )
        
        project = _as_project(project)
        profiles = _as_profiles(candidates)
        excluded = set(exclude_ids)
        picks: Dict[str, ScoredCandidate] = {}
        
        for role in wanted:
            pool = [
                p for p in profiles
                if p.primary_role == role and p.id not in excluded
            ]
            if not pool:
                logger.info(f"[{role}] no candidates available")
                continue
            
            result = self.generate_team(project, pool, 1)
            if not result.team:
                logger.info(f"[{role}] no candidate within budget")
                continue
            
            pick = result.team[0]
            picks[role] = pick
            excluded.add(pick.candidate.id)
            logger.info(f"[{role}] picked {pick.candidate.id} score={pick.score}")
        
        return picks


def generate_team(
    project: ProjectLike,
    candidates: Iterable[ProfileLike],
    team_size: Optional[int] = None,
    config: Optional[MatchingConfig] = None
) -> TeamResult:
    """Convenience wrapper around MatchingPipeline.generate_team."""
    return MatchingPipeline(config).generate_team(project, candidates, team_size)

"""
Data models for the team matching core.
Centralizes the record types passed between pipeline stages. Every record is
frozen; each stage builds new values instead of mutating its inputs.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

from .signals import SignalSet
from .validators import validate_profile, validate_project

ProfileId = Union[str, int]

STATUS_OK = "OK"
STATUS_NO_ELIGIBLE = "NO_ELIGIBLE_CANDIDATES"

DEFAULT_BUDGET_RANGE = "under_5000"


@dataclass(frozen=True)
class ProjectInput:
    """Project intake fields the matcher reads."""
    description: str = ""
    industry: Optional[str] = None
    budget_range: str = DEFAULT_BUDGET_RANGE
    project_stage: Optional[str] = None
    timeline: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ProjectInput':
        """Create ProjectInput from a project document."""
        if not isinstance(data, Mapping):
            raise TypeError(f"Project must be a mapping, got {type(data).__name__}")
        errors = validate_project(data)
        if errors:
            raise ValueError("Invalid project: " + "; ".join(errors))
        return cls(
            description=data.get('description') or '',
            industry=data.get('industry') or None,
            budget_range=data.get('budget_range') or DEFAULT_BUDGET_RANGE,
            project_stage=data.get('project_stage'),
            timeline=data.get('timeline')
        )


@dataclass(frozen=True)
class ProfessionalProfile:
    """A candidate professional, as supplied by the caller."""
    id: ProfileId
    primary_role: str = "unknown"
    years_experience: str = ""
    industry_experience: Tuple[str, ...] = ()
    hourly_rate_range: str = ""
    availability: str = ""
    professional_summary: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ProfessionalProfile':
        """
        Create ProfessionalProfile from a professional document.
        
        Args:
            data: Deserialized professional record (extra keys are ignored)
            
        Returns:
            ProfessionalProfile
            
        Raises:
            TypeError: If data is not a mapping
            ValueError: If required fields are missing or have the wrong type
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"Profile must be a mapping, got {type(data).__name__}")
        errors = validate_profile(data)
        if errors:
            raise ValueError(f"Invalid profile {data.get('id')!r}: " + "; ".join(errors))
        return cls(
            id=data['id'],
            primary_role=data.get('primary_role') or "unknown",
            years_experience=data.get('years_experience') or '',
            industry_experience=tuple(data.get('industry_experience') or ()),
            hourly_rate_range=data.get('hourly_rate_range') or '',
            availability=data.get('availability') or '',
            professional_summary=data.get('professional_summary') or ''
        )


@dataclass(frozen=True)
class ScoreBreakdown:
    """Every component behind a candidate's score."""
    capability_overlap: Tuple[str, ...]
    capability_overlap_count: int
    capability_score: float
    industry_score: float
    tfidf_similarity: float
    tfidf_score: float
    experience_score: float
    availability_score: float
    project_signals: SignalSet
    candidate_signals: SignalSet

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict form for audit logs."""
        return {
            "cap_overlap": list(self.capability_overlap),
            "cap_overlap_count": self.capability_overlap_count,
            "cap_score": self.capability_score,
            "industry_score": self.industry_score,
            "tfidf_similarity": self.tfidf_similarity,
            "tfidf_score": self.tfidf_score,
            "experience_score": self.experience_score,
            "availability_score": self.availability_score,
            "project_signals": self.project_signals.to_dict(),
            "professional_signals": self.candidate_signals.to_dict(),
        }


@dataclass(frozen=True)
class ScoredCandidate:
    """A professional with its total score and breakdown."""
    candidate: ProfessionalProfile
    score: float
    breakdown: ScoreBreakdown


@dataclass(frozen=True)
class TeamResult:
    """Result of team generation for one project."""
    status: str
    team: Tuple[ScoredCandidate, ...]
    project_signals: SignalSet
    eligible_count: int = 0
    total_count: int = 0

    @property
    def has_eligible_candidates(self) -> bool:
        return self.status != STATUS_NO_ELIGIBLE

    @property
    def member_ids(self) -> Tuple[ProfileId, ...]:
        return tuple(member.candidate.id for member in self.team)


@dataclass(frozen=True)
class Recommendation:
    """Project guidance derived from stage, timeline, budget and text signals."""
    focus: str
    recommended_actions: Tuple[str, ...] = field(default_factory=tuple)
    suggested_roles: Tuple[str, ...] = field(default_factory=tuple)
    insights: Tuple[str, ...] = field(default_factory=tuple)

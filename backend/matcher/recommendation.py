"""
Project recommendation heuristics.
Derives suggested roles, next actions and insights from the project stage,
timeline, budget bracket and the signals found in the description.
"""

from typing import Dict, List, Optional, Tuple

from .extractor import SignalExtractor
from .models import ProjectInput, Recommendation
from config import MatchingConfig

# stage -> (actions, roles, insight)
STAGE_RULES: Dict[str, Tuple[Tuple[str, ...], Tuple[str, ...], str]] = {
    "idea": (
        ("User discovery interviews", "Problem validation"),
        ("product_manager",),
        "Project is at idea stage",
    ),
    "mvp": (
        ("Define MVP scope", "Rapid feature prototyping"),
        ("software_engineer", "ui_ux_designer"),
        "MVP-stage execution detected",
    ),
    "launch": (
        ("Stability and QA testing", "Deployment readiness"),
        ("software_engineer", "qa_engineer"),
        "Launch-stage signals detected",
    ),
    "growth": (
        ("Performance optimization", "Analytics and growth experiments"),
        ("data_analyst", "growth_marketer"),
        "Growth-stage focus identified",
    ),
}

FOCUS_MESSAGES: Dict[str, str] = {
    "idea": "Focus on validating the problem and user workflow before committing to build.",
    "mvp": "Focus on delivering a functional core product with minimal features.",
    "growth": "Focus on scaling, analytics, and system robustness.",
}
DEFAULT_FOCUS = "Focus on structured execution aligned with your project goals."

LEAN_BUDGETS = ("under_5000", "5000_10000")
CORE_ROLE = "software_engineer"
COMPLEX_CAPABILITY_COUNT = 3


def _unique(items: List[str]) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(items))


class RecommendationEngine:
    """Builds stage-aware guidance for a project."""
    
    def __init__(self, config: MatchingConfig, extractor: Optional[SignalExtractor] = None):
        self.config = config
        self.extractor = extractor or SignalExtractor(config)
    
    def generate(self, project: ProjectInput) -> Recommendation:
        """
        Generate a recommendation for a project.
        
        Args:
            project: Project intake; a missing stage is treated as "idea"
            
        Returns:
            Recommendation with de-duplicated actions, roles and insights
        """
        signals = self.extractor.extract_all(project.description)
        stage = project.project_stage or "idea"
        
        actions: List[str] = []
        roles: List[str] = []
        insights: List[str] = []
        
        if stage in STAGE_RULES:
            stage_actions, stage_roles, stage_insight = STAGE_RULES[stage]
            actions.extend(stage_actions)
            roles.extend(stage_roles)
            insights.append(stage_insight)
        
        if not signals.capabilities:
            insights.append("Technical requirements are not clearly defined")
            actions.append("Clarify technical scope")
            roles.append("technical_consultant")
        
        if len(signals.capabilities) >= COMPLEX_CAPABILITY_COUNT:
            insights.append("Complex feature set detected")
            roles.append("software_architect")
        
        if signals.industries:
            insights.append("Industry-specific language detected")
        
        if project.timeline == "asap":
            actions.append("Lean execution with minimal handoffs")
            roles.append("project_manager")
            insights.append("Urgent timeline detected")
        
        if project.budget_range in LEAN_BUDGETS:
            insights.append("Budget favors lean team composition")
            actions.append("Focus on highest-impact features only")
        
        if CORE_ROLE not in roles:
            roles.append(CORE_ROLE)
        
        return Recommendation(
            focus=FOCUS_MESSAGES.get(project.project_stage or "", DEFAULT_FOCUS),
            recommended_actions=_unique(actions),
            suggested_roles=_unique(roles),
            insights=tuple(insights)
        )

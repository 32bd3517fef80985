"""
Budget filtering for candidate professionals.
Compares a candidate's minimum hourly rate with the cap of the project's
budget bracket. Only the lower bound of the rate range is considered.
"""

import logging
import re
from typing import Tuple

from .models import ProfessionalProfile
from config import BudgetConfig

logger = logging.getLogger(__name__)

# at most 9 digits, so any fragment converts without hitting int() limits
_LEADING_INT = re.compile(r"\d{1,9}")


def _to_int(fragment: str) -> int:
    """Leading integer of a fragment; 0 when it does not start with a digit."""
    match = _LEADING_INT.match(fragment.strip())
    return int(match.group()) if match else 0


def parse_rate_range(rate_range: str, open_max: int = 9999) -> Tuple[int, int]:
    """
    Parse an hourly rate range expression.
    
    Accepted forms are "min-max", "min+" and a bare number. Fragments that
    are not numeric parse as 0.
    
    Args:
        rate_range: Rate expression from the profile (may be empty)
        open_max: Upper bound used for open-ended or missing ranges
        
    Returns:
        (min, max) tuple
    """
    rate_range = (rate_range or "").strip()
    
    if rate_range == "":
        return 0, open_max
    
    if "+" in rate_range:
        return _to_int(rate_range.split("+", 1)[0]), open_max
    
    if "-" in rate_range:
        low, high = rate_range.split("-", 1)
        return _to_int(low), _to_int(high)
    
    value = _to_int(rate_range)
    return value, value


def max_rate_for_bracket(budget_range: str, budget: BudgetConfig) -> int:
    """
    Look up the hourly cap for a budget bracket.
    
    Unrecognized brackets get the most restrictive configured cap.
    """
    cap = budget.caps.get(budget_range)
    if cap is None:
        logger.debug(f"Unknown budget bracket '{budget_range}', using cap {budget.default_cap}")
        return budget.default_cap
    return cap


def passes_budget(candidate: ProfessionalProfile, budget_range: str, budget: BudgetConfig) -> bool:
    """
    Check whether a candidate's minimum rate fits the bracket cap.
    
    Args:
        candidate: Professional to check
        budget_range: Project budget bracket
        budget: Budget configuration with caps
        
    Returns:
        True if the candidate's minimum rate is at or below the cap
    """
    max_allowed = max_rate_for_bracket(budget_range, budget)
    min_rate, _ = parse_rate_range(candidate.hourly_rate_range, budget.open_max_rate)
    return min_rate <= max_allowed

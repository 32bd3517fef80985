"""
Signal dataclasses for team matching.
A SignalSet holds the canonical tags detected in one piece of free text.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List


@dataclass(frozen=True)
class SignalSet:
    """Canonical tags extracted from text, one set per lexicon."""
    capabilities: FrozenSet[str] = field(default_factory=frozenset)
    roles: FrozenSet[str] = field(default_factory=frozenset)
    industries: FrozenSet[str] = field(default_factory=frozenset)

    def is_empty(self) -> bool:
        """True when no lexicon matched."""
        return not (self.capabilities or self.roles or self.industries)

    def to_dict(self) -> Dict[str, List[str]]:
        """Sorted lists per lexicon, for logging and serialization."""
        return {
            "capabilities": sorted(self.capabilities),
            "roles": sorted(self.roles),
            "industries": sorted(self.industries),
        }

"""
Signal extraction module for team matching.
Tags free text with canonical capability, role and industry labels by
substring matching against normalized lexicon aliases.
"""

import logging
from typing import Dict, FrozenSet, Mapping, Optional, Sequence, Tuple

from .signals import SignalSet
from .text import normalize
from config import MatchingConfig

logger = logging.getLogger(__name__)

# tag -> normalized aliases, in declared order
CompiledLexicon = Tuple[Tuple[str, Tuple[str, ...]], ...]


def compile_lexicon(lexicon: Mapping[str, Sequence[str]]) -> CompiledLexicon:
    """
    Normalize every alias once, dropping aliases that normalize to nothing.
    
    Args:
        lexicon: Canonical tag -> aliases mapping
        
    Returns:
        Tuple of (tag, normalized aliases) pairs in the lexicon's order
    """
    compiled = []
    for tag, aliases in lexicon.items():
        normalized = tuple(a for a in (normalize(alias) for alias in aliases) if a)
        if len(normalized) < len(aliases):
            logger.debug(f"Lexicon tag '{tag}': skipped {len(aliases) - len(normalized)} empty alias(es)")
        compiled.append((tag, normalized))
    return tuple(compiled)


class SignalExtractor:
    """Extracts capability, role and industry signals from free text."""
    
    def __init__(self, config: MatchingConfig):
        """
        Initialize signal extractor with configuration.
        
        Args:
            config: Configuration object holding the three lexicons
        """
        self.config = config
        lexicons = config.lexicons
        self._lexicons: Dict[str, CompiledLexicon] = {
            "capabilities": compile_lexicon(lexicons.capabilities),
            "roles": compile_lexicon(lexicons.roles),
            "industries": compile_lexicon(lexicons.industries),
        }
    
    def extract(self, text: Optional[str], lexicon: Mapping[str, Sequence[str]]) -> FrozenSet[str]:
        """
        Tag text against an arbitrary lexicon.
        
        Args:
            text: Free text to scan
            lexicon: Canonical tag -> aliases mapping
            
        Returns:
            Set of tags with at least one alias found in the text
        """
        return self._match(normalize(text), compile_lexicon(lexicon))
    
    def extract_capabilities(self, text: Optional[str]) -> FrozenSet[str]:
        """
        Tag text with canonical capabilities.
        
        Args:
            text: Free text to scan
            
        Returns:
            Capability tags whose aliases appear in the text
        """
        return self._match(normalize(text), self._lexicons["capabilities"])
    
    def extract_roles(self, text: Optional[str]) -> FrozenSet[str]:
        """Tag text with canonical roles (e.g. "backend developer" -> backend_developer)."""
        return self._match(normalize(text), self._lexicons["roles"])
    
    def extract_industries(self, text: Optional[str]) -> FrozenSet[str]:
        """Tag text with canonical industries."""
        return self._match(normalize(text), self._lexicons["industries"])
    
    def extract_all(self, text: Optional[str]) -> SignalSet:
        """
        Run every configured lexicon over the text.
        
        Args:
            text: Free text (project description or professional summary)
            
        Returns:
            SignalSet with capabilities, roles and industries
        """
        haystack = normalize(text)
        if not haystack:
            return SignalSet()
        return SignalSet(
            capabilities=self._match(haystack, self._lexicons["capabilities"]),
            roles=self._match(haystack, self._lexicons["roles"]),
            industries=self._match(haystack, self._lexicons["industries"]),
        )
    
    @staticmethod
    def _match(haystack: str, lexicon: CompiledLexicon) -> FrozenSet[str]:
        if not haystack:
            return frozenset()
        return frozenset(
            tag for tag, aliases in lexicon
            if any(alias in haystack for alias in aliases)
        )

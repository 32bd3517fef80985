"""
Configuration module for the team matching core.
Loads and validates lexicons, score tables and pipeline settings from a YAML
file using Pydantic models.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, Optional, Tuple
from pathlib import Path
import logging
import sys
import yaml
import os


DEFAULT_CONFIG_PATH = Path(__file__).parent / "matcher" / "defaults.yaml"


class FrozenModel(BaseModel):
    """Base model for immutable configuration sections."""
    model_config = ConfigDict(frozen=True)


class Lexicons(FrozenModel):
    """Canonical tag -> aliases mappings, iterated in declared order."""
    capabilities: Dict[str, Tuple[str, ...]] = Field(default_factory=dict)
    roles: Dict[str, Tuple[str, ...]] = Field(default_factory=dict)
    industries: Dict[str, Tuple[str, ...]] = Field(default_factory=dict)


class ScoringWeights(FrozenModel):
    """Points awarded for each scoring dimension."""
    capability_strong: float = 40      # two or more shared capabilities
    capability_partial: float = 28     # exactly one shared capability
    capability_floor: float = 8        # no shared capability
    industry_declared: float = 12
    industry_signal: float = 8
    text_similarity_max: float = 25
    experience: Dict[str, float] = Field(default_factory=lambda: {
        "10_plus": 10,
        "7_10": 8,
        "5_7": 6,
        "3_5": 4,
        "1_3": 2,
    })
    experience_default: float = 2
    availability: Dict[str, float] = Field(default_factory=lambda: {
        "full_time": 6,
        "part_time": 4,
        "limited": 2,
        "project_based": 1,
    })
    availability_default: float = 1


class BudgetConfig(FrozenModel):
    """Maximum hourly rate allowed per project budget bracket."""
    caps: Dict[str, int] = Field(default_factory=lambda: {
        "under_5000": 75,
        "5000_10000": 100,
        "10000_25000": 150,
        "25000_50000": 200,
        "50000_plus": 9999,
    })
    open_max_rate: int = 9999

    @property
    def default_cap(self) -> int:
        """Cap used for unrecognized brackets: the most restrictive one."""
        if not self.caps:
            return 0
        return min(self.caps.values())


class TokenizerConfig(FrozenModel):
    """Token filtering used for TF-IDF vectorization."""
    stopwords: Tuple[str, ...] = ()
    min_token_length: int = 2


class PipelineSettings(FrozenModel):
    """Team generation settings."""
    default_team_size: int = 4
    max_workers: int = 4
    parallel_threshold: int = 200
    max_role_swaps: int = 3


class MatchingConfig(FrozenModel):
    """Main configuration model."""
    lexicons: Lexicons = Field(default_factory=Lexicons)
    scoring_weights: ScoringWeights = Field(default_factory=ScoringWeights)
    budget: BudgetConfig = Field(default_factory=BudgetConfig)
    tokenizer: TokenizerConfig = Field(default_factory=TokenizerConfig)
    pipeline: PipelineSettings = Field(default_factory=PipelineSettings)
    log_level: str = "INFO"


def load_config(path: Optional[str] = None) -> MatchingConfig:
    """
    Load and validate configuration from YAML file.
    
    Args:
        path: Path to configuration file (default: the bundled defaults.yaml)
        
    Returns:
        Validated MatchingConfig object
        
    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML syntax is invalid
        ValueError: If the file is empty or its structure is invalid
    """
    if path is None:
        path = str(DEFAULT_CONFIG_PATH)

    if not os.path.exists(path):
        raise FileNotFoundError(
            f"Configuration file not found: {path}\n"
            f"Please copy matcher/defaults.yaml to {path} and customize it."
        )
    
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise yaml.YAMLError(
            f"Invalid YAML syntax in {path}: {e}"
        )
    
    if data is None:
        raise ValueError(f"Configuration file {path} is empty")
    
    try:
        config = MatchingConfig(**data)
    except Exception as e:
        raise ValueError(
            f"Invalid configuration structure in {path}: {e}\n"
            f"Please check matcher/defaults.yaml for the correct format."
        )
    
    return config


CONSOLE_HANDLER_NAME = "matcher-console"


def configure_logging(level: str = "INFO", stream=None) -> None:
    """
    Attach a console handler to the root logger.
    
    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        stream: Output stream for the handler (defaults to stdout)
        
    Raises:
        ValueError: If the level name is not a known logging level
    """
    root = logging.getLogger()
    root.setLevel(str(level).upper())
    for handler in root.handlers:
        if handler.get_name() == CONSOLE_HANDLER_NAME:
            return
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(
        fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    handler.set_name(CONSOLE_HANDLER_NAME)
    root.addHandler(handler)

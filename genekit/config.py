"""
Configuration system for GENEKIT.

Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from typing import Optional
from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from genekit.models.enums import MissingDistancePolicy


class SequenceConfig(BaseSettings):
    """Sequence display configuration."""
    chunk_size: int = 10
    position_width: int = 3


class RestrictionConfig(BaseSettings):
    """Restriction analysis configuration."""
    default_enzyme: str = "EcoRI"


class PrimerConfig(BaseSettings):
    """Primer design configuration."""
    # Simple design
    simple_length: int = 20

    # Length search
    target_tm: float = 60.0
    min_length: int = 18
    max_length: int = 25

    # Validation thresholds
    gc_min: float = 40.0
    gc_max: float = 60.0
    max_tm_difference: float = 5.0
    max_amplicon: int = 3000

    # Amplification window: margin trimmed from each end (fraction of length)
    window_margin: float = 0.1
    # Reverse template starts this many bases before the window end
    reverse_anchor: int = 20
    min_detailed_length: int = 40


class PhylogenyConfig(BaseSettings):
    """Tree construction configuration."""
    missing_distance: MissingDistancePolicy = MissingDistancePolicy.ERROR


class GenekitConfig(BaseSettings):
    """Main configuration for GENEKIT."""

    model_config = SettingsConfigDict(
        env_prefix="GENEKIT_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Sub-configs
    sequence: SequenceConfig = Field(default_factory=SequenceConfig)
    restriction: RestrictionConfig = Field(default_factory=RestrictionConfig)
    primers: PrimerConfig = Field(default_factory=PrimerConfig)
    phylogeny: PhylogenyConfig = Field(default_factory=PhylogenyConfig)

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[Path] = None


@lru_cache()
def get_config() -> GenekitConfig:
    """Get cached configuration singleton."""
    return GenekitConfig()


# Convenience accessor
config = get_config()

"""Configuration for fault tree model construction."""

from dataclasses import dataclass
from typing import List


@dataclass
class ModelConfig:
    """Options applied while loading and classifying fault tree models."""

    # Lowercase identifiers on load; orig_id keeps the spelling from the file
    normalize_ids: bool = True

    # Record a tree warning for gates that no other gate references
    warn_orphan_gates: bool = True

    # Record a tree warning for defined primary events the tree never reaches
    warn_unused_primary_events: bool = True

    # Names listed in one warning before the remainder is summarized
    max_listed_names: int = 10

    def format_names(self, names: List[str]) -> str:
        """Join names for a warning, truncating after ``max_listed_names``."""
        shown = " ".join(names[: self.max_listed_names])
        rest = len(names) - self.max_listed_names
        if rest > 0:
            shown += f" ... and {rest} more"
        return shown


# Global configuration instance
MODEL_CONFIG = ModelConfig()

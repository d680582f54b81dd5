"""Configuration loader for hand comparison rule sets."""

import json
import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_RULES = "standard"
RULES_ENV_VAR = "POKER_HANDS_RULES"


class FullHouseTiebreak(str, Enum):
    """How two full houses with the same three of a kind are ordered."""

    THREE_OF_A_KIND = "three_of_a_kind"  # equal trips are a tie
    THREE_THEN_PAIR = "three_then_pair"  # equal trips fall back to the pair


@dataclass(frozen=True)
class RuleConfig:
    """Configuration for a hand comparison rule set."""

    id: str
    name: str
    description: str
    full_house_tiebreak: FullHouseTiebreak = FullHouseTiebreak.THREE_OF_A_KIND

    @classmethod
    def from_dict(cls, data: dict, default_id: str = "") -> "RuleConfig":
        """
        Build a rule set from its JSON form.

        Raises:
            ValueError: If the full house tie-break policy is unknown
        """
        tiebreak = data.get("full_house_tiebreak", FullHouseTiebreak.THREE_OF_A_KIND.value)
        try:
            full_house_tiebreak = FullHouseTiebreak(tiebreak)
        except ValueError:
            raise ValueError(f"Unknown full house tie-break policy: {tiebreak}") from None

        return cls(
            id=data.get("id", default_id),
            name=data.get("name", ""),
            description=data.get("description", ""),
            full_house_tiebreak=full_house_tiebreak,
        )


class RuleConfigLoader:
    """Loads and manages comparison rule sets."""

    def __init__(self, config_dir: Path | None = None):
        """
        Initialize the loader.

        Args:
            config_dir: Directory containing rule set JSON files.
                       Defaults to the package's data/rules directory.
        """
        if config_dir is None:
            config_dir = Path(__file__).parents[1] / "data" / "rules"

        self.config_dir = config_dir
        self._configs: dict[str, RuleConfig] = {}
        self._loaded = False

    def load_all_configs(self) -> None:
        """Load all rule set files from the directory."""
        if self._loaded:
            return

        logger.info(f"Loading rule sets from {self.config_dir}")

        if not self.config_dir.exists():
            logger.error(f"Rule set directory not found: {self.config_dir}")
            raise FileNotFoundError(f"Rule set directory not found: {self.config_dir}")

        json_files = sorted(self.config_dir.glob("*.json"))

        if not json_files:
            logger.warning(f"No rule set files found in {self.config_dir}")

        for json_file in json_files:
            rule_id = json_file.stem
            try:
                self._configs[rule_id] = self._load_config_file(json_file)
                logger.debug(f"Loaded rule set {rule_id}")
            except (OSError, ValueError) as e:
                logger.error(f"Failed to load rule set from {json_file}: {e}")
                continue

        logger.info(f"Loaded {len(self._configs)} rule sets")
        self._loaded = True

    def _load_config_file(self, filepath: Path) -> RuleConfig:
        """Load a single rule set file."""
        with open(filepath) as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Rule set must be a JSON object: {filepath}")

        return RuleConfig.from_dict(data, default_id=filepath.stem)

    def get_config(self, rule_id: str) -> RuleConfig | None:
        """
        Get a specific rule set.

        Args:
            rule_id: The rule set id (e.g., 'standard', 'strict')

        Returns:
            RuleConfig if found, None otherwise
        """
        if not self._loaded:
            self.load_all_configs()

        return self._configs.get(rule_id)

    def get_all_configs(self) -> dict[str, RuleConfig]:
        """Get all loaded rule sets."""
        if not self._loaded:
            self.load_all_configs()

        return self._configs.copy()


# Global instance
rule_config_loader = RuleConfigLoader()


def get_rule_config(rule_id: str | None = None) -> RuleConfig:
    """
    Get a rule set by id.

    Args:
        rule_id: Rule set id. Defaults to the POKER_HANDS_RULES environment
                 variable, or 'standard' when that is unset.

    Raises:
        ValueError: If no rule set has that id
    """
    if rule_id is None:
        rule_id = os.environ.get(RULES_ENV_VAR) or DEFAULT_RULES

    config = rule_config_loader.get_config(rule_id)
    if config is None:
        raise ValueError(f"No rule set found with id: {rule_id}")
    return config

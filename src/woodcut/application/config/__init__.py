"""Configuration schema and loading for cut plan files.

Public API:
    - CutPlanConfiguration: Root configuration model
    - BoardConfig, PieceConfig, EdgeMarginsConfig, TrimConfig: Nested models
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - config_to_board / config_to_pieces / config_to_policy: Domain adapters

Example:
    >>> from pathlib import Path
    >>> from woodcut.application.config import load_config, config_to_pieces
    >>>
    >>> config = load_config(Path("kitchen.json"))
    >>> pieces = config_to_pieces(config)
"""

from woodcut.application.config.adapter import (
    config_to_board,
    config_to_pieces,
    config_to_policy,
    piece_config_to_margins,
)
from woodcut.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from woodcut.application.config.schema import (
    SUPPORTED_VERSIONS,
    BoardConfig,
    CutPlanConfiguration,
    EdgeMarginsConfig,
    EdgeName,
    PieceConfig,
    ProjectConfig,
    TrimConfig,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "BoardConfig",
    "ConfigError",
    "CutPlanConfiguration",
    "EdgeMarginsConfig",
    "EdgeName",
    "PieceConfig",
    "ProjectConfig",
    "TrimConfig",
    "config_to_board",
    "config_to_pieces",
    "config_to_policy",
    "load_config",
    "load_config_from_dict",
    "piece_config_to_margins",
]

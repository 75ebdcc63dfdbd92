"""
Lambda environment configuration
"""
import logging
import os
from dataclasses import dataclass

TRUE_VALUES = ('1', 'true', 'yes', 'on')
DEFAULT_LOG_LEVEL = 'INFO'


def _log_level(value) -> str:
    level = (value or DEFAULT_LOG_LEVEL).strip().upper()
    # getLevelName returns an int only for registered level names
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level


@dataclass(frozen=True)
class Config:
    """
    Expected Environment Variables:
    - LOG_LEVEL: Level of the `cfn_secret_generator` logger. Defaults to INFO, also used for unknown level names
    - NO_ECHO: Mask the response data in CloudFormation outputs. Defaults to false
    """
    log_level: str = DEFAULT_LOG_LEVEL
    no_echo: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            log_level=_log_level(os.getenv('LOG_LEVEL')),
            no_echo=(os.getenv('NO_ECHO') or 'false').strip().lower() in TRUE_VALUES,
        )

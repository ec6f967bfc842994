import logging
import os
from typing import Literal

from pydantic_settings import BaseSettings

from last_success_sha.exceptions import MissingInputError

logger = logging.getLogger(__name__)


def get_input(name: str, required: bool = False) -> str:
    """
    Read an action input the way the runner exposes it.

    The runner exports every ``with:`` value as ``INPUT_<NAME>``, upper-cased
    and with spaces replaced by underscores.

    Args:
        name: The input name as declared in action.yml
        required: Fail if the value is empty or only whitespace

    Returns:
        The raw value, untrimmed
    """
    key = f"INPUT_{name.upper().replace(' ', '_')}"
    value = os.environ.get(key, "")
    if required and not value.strip():
        raise MissingInputError(f"Input required and not supplied: {name}")
    return value


class Config(BaseSettings):
    JOB: str
    TOKEN: str

    GITHUB_EVENT_NAME: str = ""
    GITHUB_REF: str = ""
    GITHUB_HEAD_REF: str = ""
    GITHUB_REPOSITORY: str
    GITHUB_OUTPUT: str

    GITHUB_API_URL: str = "https://api.github.com"

    OVERRIDE_LOGGING: Literal[
        "CRITICAL",
        "FATAL",
        "ERROR",
        "WARNING",
        "WARN",
        "INFO",
        "DEBUG",
        "NOTSET",
    ] = "INFO"

    def print_config(self):
        """Print configuration values with sensitive attributes masked"""
        sensitive_attrs = {"TOKEN"}

        logger.debug("=== Action Configuration ===")
        for field_name, field_value in self.model_dump().items():
            if field_name in sensitive_attrs:
                logger.debug(f"{field_name}: ***")
            else:
                logger.debug(f"{field_name}: {field_value}")
        logger.debug("============================")


def load_config() -> Config:
    job = get_input("job", required=True)
    token = get_input("token", required=True)
    return Config(JOB=job, TOKEN=token)

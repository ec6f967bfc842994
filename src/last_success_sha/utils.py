import logging

from last_success_sha.config import Config
from last_success_sha.exceptions import OutputWriteError

logger = logging.getLogger(__name__)


def set_output(config: Config, name: str, value: str) -> None:
    """Append a ``name=value`` line for the following steps to the GITHUB_OUTPUT file."""
    path = config.GITHUB_OUTPUT
    if not path:
        raise OutputWriteError("GITHUB_OUTPUT is not set, cannot write outputs")

    logger.debug("Writing output %s to %s", name, path)
    try:
        with open(path, "a", encoding="utf-8") as f:
            f.write(f"{name}={value}\n")
    except OSError as e:
        logger.error("Error writing output %s to %s: %s", name, path, e)
        raise OutputWriteError(f"Could not write output {name} to {path}: {e}") from e

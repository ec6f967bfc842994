import asyncio
import contextlib
import logging

import aiohttp
from pydantic import ValidationError

from last_success_sha.config import Config, load_config
from last_success_sha.exceptions import UnrecoverableError
from last_success_sha.utils import set_output
import last_success_sha.github.utils as github_utils

logger = logging.getLogger(__name__)


async def run(config: Config, session: aiohttp.ClientSession | None = None) -> str:
    owner, repo = github_utils.split_repository(config.GITHUB_REPOSITORY)
    branch = github_utils.get_current_branch_name(config)
    logger.info(
        "Checking for the commit hash of the latest successful run of job %s on %s/%s@%s",
        config.JOB,
        owner,
        repo,
        branch,
    )

    async with contextlib.AsyncExitStack() as stack:
        if session is None:
            session = await stack.enter_async_context(aiohttp.ClientSession())
        gh = github_utils.client_for_token(session, config)

        sha = await github_utils.get_last_successful_workflow_run_commit(
            gh, owner, repo, job_name=config.JOB, branch=branch
        )

    set_output(config, "sha", sha)
    return sha


def main() -> int:
    logging.basicConfig(level=logging.INFO)
    logger.info("Starting the action")

    try:
        config = load_config()
        logging.getLogger().setLevel(config.OVERRIDE_LOGGING)
        config.print_config()

        sha = asyncio.run(run(config))
    except (UnrecoverableError, ValidationError) as e:
        logger.error("%s", e)
        logger.debug("Traceback", exc_info=e)
        return 1

    logger.info("Done, sha=%s", sha)
    return 0

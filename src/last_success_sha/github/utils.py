import logging
from typing import AsyncIterator

import aiohttp
import gidgethub
from gidgethub.abc import GitHubAPI
from gidgethub import aiohttp as gh_aiohttp

from last_success_sha.config import Config
from last_success_sha.exceptions import (
    MalformedRefError,
    MalformedRepositoryError,
    NoWorkflowRunsError,
    UpstreamApiError,
)
from last_success_sha.github.models import (
    WorkflowRun,
    WorkflowJob,
    RunStatus,
    JobConclusion,
)

logger = logging.getLogger(__name__)

BRANCH_REF_PREFIX = "refs/heads/"
PER_PAGE = 100


def client_for_token(session: aiohttp.ClientSession, config: Config) -> GitHubAPI:
    return gh_aiohttp.GitHubAPI(
        session,
        "last-success-sha",
        oauth_token=config.TOKEN,
        base_url=config.GITHUB_API_URL,
    )


def get_current_branch_name(config: Config) -> str:
    """
    Branch the workflow runs are searched on.

    Pull request events use GITHUB_HEAD_REF as is. Other events need a
    ``refs/heads/<branch>`` ref; everything after the prefix is the branch, so
    slashed names stay whole (``refs/heads/release/1.x`` gives ``release/1.x``,
    not ``release``) and match the head branch reported on jobs.

    Raises:
        MalformedRefError: Tag refs, short refs or an empty head ref
    """
    if config.GITHUB_EVENT_NAME == "pull_request":
        logger.info("Event is pull request, returning GITHUB_HEAD_REF")
        if not config.GITHUB_HEAD_REF:
            raise MalformedRefError("Could not get branch name from GITHUB_HEAD_REF")
        return config.GITHUB_HEAD_REF

    logger.info("Event is not pull request, returning GITHUB_REF")
    ref = config.GITHUB_REF
    branch = ref.removeprefix(BRANCH_REF_PREFIX)
    if not ref.startswith(BRANCH_REF_PREFIX) or branch == "":
        raise MalformedRefError(
            f"Could not get branch name from GITHUB_REF {ref!r}, expected refs/heads/<branch>"
        )
    return branch


def split_repository(full_name: str) -> tuple[str, str]:
    owner, _, repo = full_name.partition("/")
    if not owner or not repo or "/" in repo:
        raise MalformedRepositoryError(
            f"Repository {full_name!r} is not of the form owner/repo"
        )
    return owner, repo


async def iter_workflow_runs(
    gh: GitHubAPI, owner: str, repo: str, branch: str
) -> AsyncIterator[WorkflowRun]:
    """Completed runs on ``branch``, newest first, across all pages."""
    try:
        async for item in gh.getiter(
            "/repos/{owner}/{repo}/actions/runs{?status,branch,per_page}",
            {
                "owner": owner,
                "repo": repo,
                "status": RunStatus.completed.value,
                "branch": branch,
                "per_page": PER_PAGE,
            },
            iterable_key="workflow_runs",
        ):
            yield WorkflowRun.model_validate(item)
    except (gidgethub.GitHubException, aiohttp.ClientError) as e:
        logger.error("Error getting workflow runs: %s", e)
        raise UpstreamApiError(f"Error getting workflow runs: {e}") from e


async def iter_workflow_jobs(
    gh: GitHubAPI, owner: str, repo: str, run_id: int
) -> AsyncIterator[WorkflowJob]:
    try:
        async for item in gh.getiter(
            "/repos/{owner}/{repo}/actions/runs/{run_id}/jobs{?per_page}",
            {"owner": owner, "repo": repo, "run_id": run_id, "per_page": PER_PAGE},
            iterable_key="jobs",
        ):
            yield WorkflowJob.model_validate(item)
    except (gidgethub.GitHubException, aiohttp.ClientError) as e:
        logger.error("Error getting workflow jobs for run %d: %s", run_id, e)
        raise UpstreamApiError(
            f"Error getting workflow jobs for run {run_id}: {e}"
        ) from e


def is_successful_job(job: WorkflowJob, job_name: str, branch: str) -> bool:
    return (
        job.name == job_name
        and job.status == RunStatus.completed
        and job.conclusion == JobConclusion.success
        and job.head_branch == branch
    )


async def get_last_successful_workflow_run_commit(
    gh: GitHubAPI, owner: str, repo: str, job_name: str, branch: str
) -> str:
    """
    Find the commit of the newest run in which ``job_name`` succeeded.

    Runs are inspected newest first and the search stops at the first match,
    so older runs (and later pages) are never requested. When no run has a
    successful job of that name, the newest run's commit is returned.

    Raises:
        NoWorkflowRunsError: The branch has no completed runs at all
        UpstreamApiError: Listing runs or jobs failed
    """
    newest_run: WorkflowRun | None = None

    async for workflow_run in iter_workflow_runs(gh, owner, repo, branch):
        if newest_run is None:
            newest_run = workflow_run

        commit_sha = workflow_run.commit_sha
        logger.info(
            "Checking all jobs of run %d in commit of hash: %s",
            workflow_run.id,
            commit_sha,
        )
        async for job in iter_workflow_jobs(gh, owner, repo, workflow_run.id):
            logger.debug("Job name: %s", job.name)
            logger.debug("Job status: %s", job.status)
            logger.debug("Job conclusion: %s", job.conclusion)
            logger.debug("Job head branch: %s", job.head_branch)
            if is_successful_job(job, job_name, branch):
                logger.info(
                    "The hash of the latest commit in which job %s was successful: %s",
                    job_name,
                    commit_sha,
                )
                return commit_sha

    if newest_run is None:
        raise NoWorkflowRunsError(
            f"No completed workflow runs found on branch {branch} of {owner}/{repo}"
        )

    logger.info(
        "Unable to find job %s in successful state in any of the previous workflow runs, "
        "defaulting to the latest commit hash: %s",
        job_name,
        newest_run.commit_sha,
    )
    return newest_run.commit_sha

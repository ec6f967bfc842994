from pydantic import BaseModel, ConfigDict
from enum import StrEnum


class RunStatus(StrEnum):
    queued = "queued"
    in_progress = "in_progress"
    completed = "completed"


class JobConclusion(StrEnum):
    success = "success"
    failure = "failure"
    neutral = "neutral"
    cancelled = "cancelled"
    skipped = "skipped"
    timed_out = "timed_out"
    action_required = "action_required"


class HeadCommit(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str


class WorkflowRun(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    status: str | None = None
    conclusion: str | None = None
    head_branch: str | None = None
    head_sha: str
    head_commit: HeadCommit | None = None

    @property
    def commit_sha(self) -> str:
        if self.head_commit is not None:
            return self.head_commit.id
        return self.head_sha


class WorkflowJob(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    run_id: int
    name: str
    status: str
    conclusion: str | None = None
    head_branch: str | None = None

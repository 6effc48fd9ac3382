"""On-disk document schemas and shared types."""

import re
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Annotated, Literal

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

_UNSAFE_ID = re.compile(r"[/\\]|\.\.|\0")


def _safe_id(value: str) -> str:
    if _UNSAFE_ID.search(value):
        raise ValueError("ID must not contain path separators (/\\), '..', or null bytes.")
    return value


Id = Annotated[str, StringConstraints(min_length=1), AfterValidator(_safe_id)]
Text = Annotated[str, StringConstraints(min_length=1)]
Timestamp = Annotated[str, StringConstraints(pattern=r"^\d{4}-\d{2}-\d{2}[ T]\d{2}:\d{2}")]


class TaskStatus(StrEnum):
    """Semantic task status derived from board column placement.

    Declaration order is the alias-matching precedence.
    """

    PENDING = "pending"
    ONGOING = "ongoing"
    BLOCKED = "blocked"
    COMPLETED = "completed"


MissionStatus = Literal["active", "paused", "archived", "completed"]
SystemRole = Literal["manager", "worker"]


class Document(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    def dump(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class Mission(Document):
    schema_version: Literal[1] = 1
    id: Id
    name: Text
    description: str = ""
    status: MissionStatus = "active"
    created_at: Timestamp
    updated_at: Timestamp


class MissionIndexEntry(Document):
    id: Id
    name: Text
    description: str = ""
    path: Text
    status: MissionStatus = "active"
    created_at: Timestamp
    updated_at: Timestamp


class MissionsIndex(Document):
    schema_version: Literal[1] = 1
    updated_at: Timestamp
    missions: list[MissionIndexEntry] = Field(default_factory=list)


class TaskColumn(Document):
    id: Id
    name: Text
    order: int


class Task(Document):
    id: Id
    title: Text
    description: Text
    column_id: Id
    status_notes: str = ""
    assignee_agent_id: Id | None = None
    created_at: Timestamp
    updated_at: Timestamp


class TaskView(Task):
    """A task decorated with its derived status."""

    status: TaskStatus


class TasksFile(Document):
    schema_version: Literal[1] = 1
    description: Text
    columns: list[TaskColumn] = Field(default_factory=list)
    tasks: list[Task] = Field(default_factory=list)


class Agent(Document):
    id: Id
    display_name: Text
    role_description: str = ""
    system_role: SystemRole
    status: Literal["active", "paused"] | None = None


class AgentsFile(Document):
    schema_version: Literal[1] = 1
    agents: list[Agent] = Field(default_factory=list)


class ThreadMessage(Document):
    type: Literal["message"] = "message"
    id: Id
    created_at: Timestamp
    author_agent_id: Id
    mentions_agent_ids: Annotated[list[Id], Field(min_length=1)]
    content: Text


class InboxAck(Document):
    type: Literal["ack"] = "ack"
    acked_at: Timestamp
    mission_id: Id
    agent_id: Id
    message_id: Id
    task_id: Id | None = None


class WorkingEvent(Document):
    id: Id
    created_at: Timestamp
    agent_id: Id
    content: Text


class ThreadSummary(Document):
    task_id: Id
    message_count: int
    last_message_at: str | None = None
    last_author_agent_id: str | None = None
    last_mentions_agent_ids: list[str] = Field(default_factory=list)


class CliInvocation(Document):
    timestamp: Timestamp
    command: str


@dataclass
class UnreadMention:
    """A thread message that mentions one agent and is not in its ledger."""

    task_id: str
    message_id: str
    author_agent_id: str
    mentions_agent_ids: list[str]
    content: str
    created_at: str


@dataclass
class UnackedMention:
    """A thread message with at least one mentioned agent still pending."""

    task_id: str
    message_id: str
    author_agent_id: str
    created_at: str
    unacked_agent_ids: list[str] = field(default_factory=list)


@dataclass
class AckAllResult:
    acked_entries: int = 0
    acked_messages: int = 0
    acked_agents: int = 0

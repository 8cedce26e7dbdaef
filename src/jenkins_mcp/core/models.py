from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class JenkinsModel(BaseModel):
    """
    Base for Jenkins API snapshots.
    Field names are snake_case; aliases keep Jenkins' JSON names so the
    models can be dumped back in the shape the server uses.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class JenkinsResource(JenkinsModel):
    """A single fetched resource; unmodelled server fields are kept and dumped back."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class Build(JenkinsResource):
    class_name: Optional[str] = Field(default=None, alias="_class")
    number: int = Field(gt=0)
    url: str
    result: Optional[str] = None
    building: Optional[bool] = None
    duration: Optional[int] = None
    timestamp: Optional[int] = None
    display_name: Optional[str] = Field(default=None, alias="displayName")
    full_display_name: Optional[str] = Field(default=None, alias="fullDisplayName")


class Item(JenkinsModel):
    """A job or a folder."""

    class_name: str = Field(alias="_class")
    name: str
    full_name: str = Field(alias="fullName")
    url: str
    color: Optional[str] = None
    buildable: Optional[bool] = None
    builds: Optional[List[Build]] = None
    last_build: Optional[Build] = Field(default=None, alias="lastBuild")
    last_successful_build: Optional[Build] = Field(
        default=None, alias="lastSuccessfulBuild"
    )
    last_failed_build: Optional[Build] = Field(default=None, alias="lastFailedBuild")


class QueueTask(JenkinsResource):
    # pipeline placeholder tasks (node {} blocks) carry only a _class
    class_name: Optional[str] = Field(default=None, alias="_class")
    name: Optional[str] = None
    url: Optional[str] = None


class QueueItem(JenkinsResource):
    class_name: Optional[str] = Field(default=None, alias="_class")
    id: int = Field(ge=0)
    task: QueueTask
    why: Optional[str] = None
    blocked: Optional[bool] = None
    buildable: Optional[bool] = None
    stuck: Optional[bool] = None


class Node(JenkinsResource):
    class_name: Optional[str] = Field(default=None, alias="_class")
    display_name: str = Field(alias="displayName")
    description: Optional[str] = None
    num_executors: int = Field(default=0, alias="numExecutors")
    offline: bool = False
    temporarily_offline: Optional[bool] = Field(
        default=None, alias="temporarilyOffline"
    )


# --- Collection envelopes -------------------------------------------------- #


class ItemList(JenkinsModel):
    jobs: Optional[List[Item]] = None


class JobLastBuild(JenkinsModel):
    full_name: str = Field(alias="fullName")
    last_build: Optional[Build] = Field(default=None, alias="lastBuild")


class JobLastBuildList(JenkinsModel):
    jobs: Optional[List[JobLastBuild]] = None


class NodeList(JenkinsModel):
    computer: Optional[List[Node]] = None


class QueueItemList(JenkinsModel):
    items: Optional[List[QueueItem]] = None


class Crumb(JenkinsModel):
    value: str = Field(alias="crumb", min_length=1)
    field: str = Field(alias="crumbRequestField", min_length=1)


__all__ = [
    "JenkinsModel",
    "JenkinsResource",
    "Build",
    "Item",
    "QueueTask",
    "QueueItem",
    "Node",
    "ItemList",
    "JobLastBuild",
    "JobLastBuildList",
    "NodeList",
    "QueueItemList",
    "Crumb",
]

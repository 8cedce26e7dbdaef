from __future__ import annotations

from typing import List

from ..models import Build, JobLastBuildList
from ..paths import ROOT_API_PATH, build_api_path, build_console_path, stop_build_path
from ._base import PLAIN_TEXT, ResourceApi, tree

RUNNING_BUILDS_TREE = tree(
    "jobs[fullName,lastBuild[number,url,building,timestamp,duration]]"
)


class BuildsApi(ResourceApi):
    async def get_build(self, full_name: str, build_number: int) -> Build:
        return await self._get(Build, build_api_path(full_name, build_number))

    async def get_build_console_output(self, full_name: str, build_number: int) -> str:
        # full log, unpaginated
        return await self._get_text(
            build_console_path(full_name, build_number), accept=PLAIN_TEXT
        )

    async def get_running_builds(self) -> List[Build]:
        """
        Builds currently in progress.

        Only each job's lastBuild is inspected, so an older build that is still
        running behind a newer one is not reported.
        """
        payload = await self._get(
            JobLastBuildList, ROOT_API_PATH, params=RUNNING_BUILDS_TREE
        )
        running: List[Build] = []
        for job in payload.jobs or []:
            last = job.last_build
            if last is None or not last.building:
                continue
            running.append(
                last.model_copy(
                    update={"full_display_name": f"{job.full_name} #{last.number}"}
                )
            )
        return running

    async def stop_build(self, full_name: str, build_number: int) -> None:
        await self._post(stop_build_path(full_name, build_number))


__all__ = ["BuildsApi"]

"""Advanced Roadmaps teams (rest/teams/1.0, not versioned with the platform API)."""

from jira_cloud.core.transport import ResponseScheme
from jira_cloud.schemas.user import TeamPageScheme, TeamPayload
from jira_cloud.services.base import Service


class TeamService(Service):
    api_prefix = "rest/teams/1.0"

    async def gets(self, max_results: int = 50) -> tuple[TeamPageScheme, ResponseScheme]:
        endpoint = self._endpoint("teams", "find")
        return await self._call("POST", endpoint, TeamPageScheme, {"maxResults": max_results})

    async def create(self, payload: TeamPayload) -> tuple[int, ResponseScheme]:
        """Create a team; Jira answers with the new team id."""
        return await self._call("POST", self._endpoint("teams", "create"), int, payload)

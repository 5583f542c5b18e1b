"""
CLI check of Jira credentials: prints the authenticated user.

  python -m jira_cloud.whoami

Reads JIRA_SITE, JIRA_EMAIL, JIRA_API_TOKEN (and optional JIRA_API_VERSION) from env or .env.
"""

import asyncio
import logging
import sys

from jira_cloud.client import Jira, JiraNotConfiguredError
from jira_cloud.core.config import get_settings
from jira_cloud.core.errors import JiraError

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


async def _whoami() -> int:
    try:
        jira = Jira.from_settings(get_settings())
    except JiraNotConfiguredError as e:
        logger.error("%s", e.message)
        return 1
    async with jira:
        try:
            user, response = await jira.myself.details()
        except JiraError as e:
            logger.error("Jira request failed: %s", e.message)
            return 1
    logger.info(
        "Authenticated: account_id=%s display_name=%s status=%s",
        user.account_id if user else None,
        user.display_name if user else None,
        response.code,
    )
    return 0


def main() -> int:
    """Call GET myself with the configured credentials."""
    try:
        return asyncio.run(_whoami())
    except Exception as e:
        logger.exception("whoami failed: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""Rebuild every user's share points from the share log.

Safe to run at any time and any number of times: each user's points are
set to the number of share log rows they own.
"""

import asyncio
import sys

import logfire

from cardiac.config import Settings
from cardiac.domain.service import ShareService
from cardiac.util.di.container import create_container
from cardiac.util.observability import configure_logfire


async def recompute() -> int:
    container = create_container()
    try:
        async with container() as request_container:
            share_service = await request_container.get(ShareService)
            return await share_service.recompute_share_points()
    finally:
        await container.close()


def main() -> int:
    """Run the repair and report how many users were updated."""
    settings = Settings()
    configure_logfire(settings)

    try:
        updated = asyncio.run(recompute())
        logfire.info("Share points recomputed", users=updated)
        print(f"Recomputed share points for {updated} users")
        return 0

    except Exception as e:
        logfire.error(
            "Share point recompute failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())

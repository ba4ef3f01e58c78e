import logging
from typing import AsyncIterator

import httpx

from config import WAITLIST_API_TIMEOUT, WAITLIST_API_URL
from models import WaitlistSubmission


async def get_upstream_client() -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(timeout=WAITLIST_API_TIMEOUT) as client:
        yield client


def get_upstream_url() -> str:
    return WAITLIST_API_URL


async def forward_submission(
    client: httpx.AsyncClient, url: str, submission: WaitlistSubmission
) -> httpx.Response:
    """POST the submission once. Fields the caller never sent are left out of the body."""
    logging.debug("Forwarding submission to %s", url)
    return await client.post(
        url,
        headers={"Content-Type": "application/json"},
        json=submission.model_dump(exclude_unset=True),
    )

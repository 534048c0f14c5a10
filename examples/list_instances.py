"""List compute instances page by page with the async responses client."""

from __future__ import annotations

import asyncio
import os
import uuid

from contabo_client import AsyncContaboResponsesClient, bearer_token_editor, with_request_editor


def _token() -> str:
    token = os.getenv("CONTABO_ACCESS_TOKEN", "").strip()
    if not token:
        raise RuntimeError("CONTABO_ACCESS_TOKEN must be set")
    return token


async def main() -> None:
    async with AsyncContaboResponsesClient.from_env(with_request_editor(bearer_token_editor(_token))) as client:
        page = 1
        while True:
            envelope = await client.instances.list(
                page=page,
                size=25,
                order_by=["name:asc"],
                x_request_id=str(uuid.uuid4()),
            )
            listing = envelope.payload_for(200)
            if listing is None:
                print(f"HTTP {envelope.status_code}: {envelope.body.decode('utf-8', errors='replace')}")
                return

            for instance in listing.data:
                print(f"{instance.instance_id}\t{instance.display_name or instance.name}\t{instance.status}")

            pagination = listing.pagination
            if pagination is None or pagination.total_pages is None or page >= pagination.total_pages:
                return
            page += 1


if __name__ == "__main__":
    asyncio.run(main())

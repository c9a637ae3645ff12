"""Utility script showing one deferred record spanning concurrent async steps."""

import asyncio
import logging
import os
import sys
from pathlib import Path

# Add project root to Python path
ROOT_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT_DIR))

from log_defer import Session
from log_defer.sinks import JsonLinesSink
from log_defer.utils import render_timeline

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)


async def fetch_results(log: Session) -> None:
    with log.timer("fetching results"):
        await asyncio.sleep(0.05)
    with log.timer("fetching results stage 2"):
        await asyncio.sleep(0.08)
    log.info("results sent")


async def update_cache(log: Session) -> None:
    with log.timer("update cache"):
        await asyncio.sleep(0.05)
    log.debug("cache updated")


async def run() -> None:
    done = asyncio.Event()
    sink = JsonLinesSink()

    def emit(record) -> None:
        sink(record)
        print(render_timeline(record))
        done.set()

    log = Session(emit, level="debug")
    with log.timer("parsing request"):
        log.data()["request_id"] = "example-1"
        await asyncio.sleep(0.01)

    tasks = [
        asyncio.create_task(log.continuation(fetch_results)(log)),
        asyncio.create_task(log.continuation(update_cache)(log)),
    ]
    log.release()
    await asyncio.gather(*tasks)
    await done.wait()


if __name__ == "__main__":
    asyncio.run(run())

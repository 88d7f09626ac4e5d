#!/usr/bin/env python3
"""
Warm the local catalog cache from Open Library.

Usage:
    python prefetch_data.py                  # Prefetch default genres
    python prefetch_data.py fantasy history  # Prefetch specific genres
    python prefetch_data.py --pages 1        # Pages per genre
    python prefetch_data.py --stats          # Show cache contents
"""

import asyncio
import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.container import container
from prefetch import Done, PrefetchConfig, Running
from settings import DB_PATH, PREFETCH_GENRES, PREFETCH_PAGES
from settings.logging import setup_logging

logger = setup_logging(level="INFO", to_file=True)


async def show_stats() -> bool:
    """Print row counts of the cache store."""
    container.init()
    await container.store.init()
    stats = await container.store.stats()
    await container.store.close()

    print("\n" + "=" * 40)
    print(f"CACHE REPORT ({DB_PATH})")
    print("=" * 40)
    for table, count in stats.items():
        print(f"  {table:<22} {count:>8,}")
    print("=" * 40 + "\n")
    return bool(stats)


async def run_prefetch(config: PrefetchConfig) -> bool:
    """Run one prefetch pass with progress logging."""
    container.init(prefetch_config=config)

    def report(status) -> None:
        if isinstance(status, Running) and status.progress % 10 == 0:
            logger.info("Progress {}/{}: {}", status.progress, status.total, status.message)

    container.prefetch.subscribe(report)
    await container.start()
    try:
        online = await container.network.probe()
        if not online:
            logger.warning("Catalog API unreachable, nothing to prefetch")
            return False
        status = await container.prefetch.run_once()
    finally:
        await container.shutdown()

    logger.info("Final status: {}", status.to_dict())
    return isinstance(status, Done)


def parse_args(args: list[str]) -> tuple[list[str], int]:
    pages = PREFETCH_PAGES
    if "--pages" in args:
        i = args.index("--pages")
        try:
            pages = int(args[i + 1])
        except (IndexError, ValueError):
            print(__doc__)
            sys.exit(1)
        args = args[:i] + args[i + 2 :]
    genres = [a for a in args if not a.startswith("-")]
    return genres, pages


def main():
    args = sys.argv[1:]

    if "--stats" in args:
        asyncio.run(show_stats())
        return

    genres, pages = parse_args(args)
    config = PrefetchConfig(genres=tuple(genres) or PREFETCH_GENRES, pages_per_genre=pages)
    logger.info("Prefetching {} ({} pages each)", ", ".join(config.genres), pages)

    ok = asyncio.run(run_prefetch(config))
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()

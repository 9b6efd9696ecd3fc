"""Script to populate missing monument slugs."""
import asyncio
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.database import AsyncSessionLocal, close_db
from app.logging_config import setup_logging
from app.services.slug_backfill import populate_missing_slugs


async def main() -> int:
    """Run the back-fill and return a process exit code."""
    try:
        async with AsyncSessionLocal() as db:
            result = await populate_missing_slugs(db)
    finally:
        await close_db()

    print("=" * 60)
    print("Slug population complete")
    print(f"  Total monuments processed: {result.total}")
    print(f"  Successfully updated: {result.updated}")
    print(f"  Errors: {result.errors}")
    print("=" * 60)

    if result.errors:
        print(f"Failed monument ids: {', '.join(map(str, result.failed_ids))}")
        return 1
    return 0


if __name__ == "__main__":
    setup_logging(fmt="text")
    sys.exit(asyncio.run(main()))

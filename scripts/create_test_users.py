import asyncio
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dotenv import load_dotenv

from approval_backend.application.use_cases.maintenance.seed_test_users import SeedTestUsersUseCase
from approval_backend.di.container import get_container
from approval_backend.domain.exceptions import AccountError


async def run() -> int:
    use_case = get_container().get(SeedTestUsersUseCase)
    try:
        created, skipped = await use_case.execute()
    except AccountError as exc:
        print(f"Error creating test users: {exc}", file=sys.stderr)
        return 1

    for email in created:
        print(f"Test user created: {email}")
    for email in skipped:
        print(f"Test user already exists: {email}")
    print("Test users seeding completed")
    return 0


def main() -> int:
    load_dotenv(ROOT / ".env")
    return asyncio.run(run())


if __name__ == "__main__":
    raise SystemExit(main())

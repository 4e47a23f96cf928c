import argparse
import asyncio
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dotenv import load_dotenv

from approval_backend.application.use_cases.maintenance.clear_users import ClearUsersUseCase
from approval_backend.di.container import get_container
from approval_backend.domain.exceptions import AccountError


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Delete ALL user records")
    parser.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")
    return parser.parse_args(argv)


def confirm(prompt_input=input) -> bool:
    answer = prompt_input("Are you sure you want to clear the database? (yes/no): ")
    return answer.strip().lower() == "yes"


async def run() -> int:
    print("Clearing database...")
    try:
        deleted = await get_container().get(ClearUsersUseCase).execute()
    except AccountError as exc:
        print(f"Error clearing database: {exc}", file=sys.stderr)
        return 1
    print(f"Database cleared successfully ({deleted} user(s) removed)")
    return 0


def main(argv=None, prompt_input=input) -> int:
    args = parse_args(argv)
    if not args.yes and not confirm(prompt_input):
        print("Database clearing cancelled")
        return 0

    load_dotenv(ROOT / ".env")
    return asyncio.run(run())


if __name__ == "__main__":
    raise SystemExit(main())

import argparse
import asyncio
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dotenv import load_dotenv

from approval_backend.application.use_cases.maintenance.create_admin import (
    DEFAULT_ADMIN_EMAIL,
    DEFAULT_ADMIN_NAME,
    DEFAULT_ADMIN_PASSWORD,
    CreateAdminUseCase,
)
from approval_backend.di.container import get_container
from approval_backend.domain.exceptions import AccountError


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create the admin account if none exists")
    parser.add_argument("--name", default=DEFAULT_ADMIN_NAME, help="Display name for the admin")
    parser.add_argument("--email", default=DEFAULT_ADMIN_EMAIL, help="Login email for the admin")
    parser.add_argument("--password", default=DEFAULT_ADMIN_PASSWORD, help="Initial password")
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> int:
    use_case = get_container().get(CreateAdminUseCase)
    try:
        result = await use_case.execute(name=args.name, email=args.email, password=args.password)
    except AccountError as exc:
        print(f"Error creating admin: {exc}", file=sys.stderr)
        return 1

    if not result.created:
        print("Admin user already exists")
        print(f"Email: {result.user.email}")
        return 0

    print("Admin user created successfully:")
    print(f"Email: {result.user.email}")
    print(f"Password: {args.password}")
    print(f"Role: {result.user.role}")
    print(f"Status: {result.user.status}")
    return 0


def main(argv=None) -> int:
    load_dotenv(ROOT / ".env")
    return asyncio.run(run(parse_args(argv)))


if __name__ == "__main__":
    raise SystemExit(main())

import argparse
import getpass
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from schoolsite.infrastructure.persistence.sqlite import SQLitePersistence  # noqa: E402
from schoolsite.services.password_hasher import PasswordHasher  # noqa: E402


def main() -> None:
    load_dotenv()

    parser = argparse.ArgumentParser(description="Create an administrator account.")
    parser.add_argument("email")
    parser.add_argument("--first-name", default="")
    parser.add_argument("--last-name", default="")
    parser.add_argument("--role", default="admin")
    args = parser.parse_args()

    database_path = Path(os.getenv("DATABASE_PATH", "data/school.db")).resolve()
    persistence = SQLitePersistence(database_path)
    try:
        if persistence.get_admin_by_email(args.email):
            raise SystemExit(f"An administrator already exists for {args.email}.")

        password = getpass.getpass("Password: ")
        if password != getpass.getpass("Repeat password: "):
            raise SystemExit("Passwords do not match.")
        if len(password) < 6:
            raise SystemExit("Password must be at least 6 characters.")

        admin = persistence.create_admin(
            email=args.email,
            password_hash=PasswordHasher().hash(password),
            first_name=args.first_name,
            last_name=args.last_name,
            role=args.role,
        )
    finally:
        persistence.close()
    print("Administrator created:", admin.id, admin.email)


if __name__ == "__main__":
    main()

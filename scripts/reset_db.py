import argparse
import sys

from app.config import get_settings
from app.core.logging import setup_logging
from app.database import current_version, engine, reset_database


def parse_args():
    parser = argparse.ArgumentParser(
        description="Drop the product table and rebuild it with the sample rows."
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Allow resetting when ENVIRONMENT is not 'local'.",
    )
    return parser.parse_args()


def main():
    setup_logging()
    args = parse_args()
    settings = get_settings()

    if settings.ENVIRONMENT.lower() != "local" and not args.force:
        print(
            f"Refusing to reset the {settings.ENVIRONMENT} database; pass --force to override.",
            file=sys.stderr,
        )
        return 1

    reset_database(engine)
    print(f"Database reset to schema version {current_version(engine)}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

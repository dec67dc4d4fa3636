import argparse
import sys
from pathlib import Path

from core.logging_setup import setup_console_logging
from testhub.client import StorageService
from testhub.utils import read_json_file

setup_console_logging()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Test Hub maintenance commands")
    commands = parser.add_subparsers(dest="command", required=True)

    seed = commands.add_parser("seed", help="Seed an empty server with tests")
    seed.add_argument(
        "file",
        type=Path,
        help="JSON file with an array of tests or {\"tests\": [...]}",
    )
    seed.add_argument(
        "--url",
        default="http://localhost:3000",
        help="Server base URL",
    )
    return parser.parse_args(argv)


def load_seed_tests(path: Path) -> list[dict[str, object]]:
    payload = read_json_file(path, [])
    if isinstance(payload, dict):
        payload = payload.get("tests", [])
    if not isinstance(payload, list):
        raise ValueError(f"{path} does not contain a list of tests")
    return payload


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    if not args.file.exists():
        print(f"Seed file not found: {args.file}", file=sys.stderr)
        return 1
    tests = load_seed_tests(args.file)
    message = StorageService(args.url).init_data(tests)
    if message is None:
        print("Seeding failed, see log for details", file=sys.stderr)
        return 1
    print(message)
    return 0


if __name__ == "__main__":
    sys.exit(main())

import argparse
import os

import uvicorn


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Test Hub server")
    parser.add_argument("--host", default=None, help="Listen address (default: HOST or 0.0.0.0)")
    parser.add_argument("--port", type=int, default=None, help="Listen port (default: PORT or 3000)")
    parser.add_argument(
        "--database-url",
        default=None,
        help="SQLAlchemy URL of the store (overrides DATABASE_URL)",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    # Must be set before testhub.config is first imported
    if args.database_url:
        os.environ["DATABASE_URL"] = args.database_url

    from testhub.config import HOST, LOG_LEVEL, PORT

    uvicorn.run(
        "testhub.app:app",
        host=args.host or HOST,
        port=args.port or PORT,
        log_level=LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()

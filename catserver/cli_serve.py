import argparse
import logging
import os
import sys

import uvicorn

from catserver.config.settings import settings
from catserver.exceptions import ConfigurationError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cat-server", description="Serve one directory tree read-only over HTTP."
    )
    parser.add_argument("--host", default=None, help="Bind address")
    parser.add_argument("--port", type=int, default=None, help="Bind port")
    parser.add_argument("--dir", dest="directory", default=None, help="Directory to serve")
    parser.add_argument(
        "--max-file-size", type=int, default=None, help="Largest readable file in bytes"
    )
    parser.add_argument(
        "--reload", action="store_true", help="Restart on code changes (development)"
    )
    return parser


_OVERRIDES = (
    ("host", "host", "CAT_SERVER_HOST"),
    ("port", "port", "CAT_SERVER_PORT"),
    ("directory", "base_directory", "CAT_SERVER_DIR"),
    ("max_file_size", "max_file_size", "CAT_SERVER_MAX_FILE_SIZE"),
)


def apply_overrides(args: argparse.Namespace) -> None:
    """
    Copy command line values over the environment-derived settings.

    The environment is updated too, so reloader worker processes that
    rebuild settings from scratch see the same values.
    """
    for arg_name, setting_name, env_key in _OVERRIDES:
        value = getattr(args, arg_name)
        if value is not None:
            setattr(settings, setting_name, value)
            os.environ[env_key] = str(value)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    apply_overrides(args)

    try:
        settings.validate()
    except ConfigurationError as e:
        logging.getLogger(__name__).error(f"Invalid configuration: {e}")
        return 1

    # Run FastAPI app from catserver.main:app
    uvicorn.run(
        "catserver.main:app",
        host=settings.host,
        port=settings.port,
        reload=args.reload,
        log_level=settings.log_level,
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

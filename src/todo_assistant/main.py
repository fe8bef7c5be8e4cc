"""Todo assistant entry point."""

import asyncio
import sys

from dotenv import find_dotenv, load_dotenv

from .cli import run_cli


def main() -> None:
    """Main entry point."""
    load_dotenv(find_dotenv(usecwd=True))
    try:
        exit_code = asyncio.run(run_cli())
    except KeyboardInterrupt:
        # asyncio.run re-raises Ctrl+C after the shell has already shut down
        exit_code = 0
    sys.exit(exit_code)


if __name__ == "__main__":
    main()

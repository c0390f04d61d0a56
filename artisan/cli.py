"""CLI entry point for artisan.

Usage::

    artisan make:resource Post
    artisan make:migration CreateComments
    artisan serve --port=8080
    python -m artisan list
"""

from __future__ import annotations

import asyncio
import sys
import traceback
from collections.abc import Sequence

from rich.markup import escape

from artisan.commands import Dispatcher, build_registry
from artisan.config import Config
from artisan.utils import console, print_error, print_warning


async def run(argv: Sequence[str], config: Config | None = None) -> int:
    """Build a registry for this invocation and dispatch *argv* through it."""
    config = config or Config.from_env()
    dispatcher = Dispatcher(build_registry(config))
    return await dispatcher.dispatch(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run one CLI invocation and return the process exit code.

    Command and artifact failures are reported by the dispatcher and still
    exit with 0.  Only an error escaping the dispatcher is fatal and exits
    with 1.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        asyncio.run(run(args))
    except KeyboardInterrupt:
        print_warning("Interrupted.")
        return 130
    except Exception as exc:
        print_error(f"Fatal error: {exc}")
        console.print(f"[dim]{escape(traceback.format_exc())}[/dim]")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Entry point: python -m stagefs"""

from __future__ import annotations

import argparse
import asyncio
import sys

from stagefs.errors import StageFsError
from stagefs.fs.copy import copy_dir_recursive
from stagefs.fs.executor import shutdown_executor
from stagefs.fs.probe import path_exists
from stagefs.fs.remove import remove_dir_all
from stagefs.infrastructure import config
from stagefs.infrastructure.logger import install_exception_hooks
from stagefs.ui.emoji import ERROR, SUCCESS
from stagefs.ui.spinner import spinner
from stagefs.url import parse_public_url


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="stagefs", description="Stage and clean build directories")
    sub = parser.add_subparsers(dest="command", required=True)

    cp = sub.add_parser("copy", help="Copy the contents of SRC into DEST")
    cp.add_argument("src")
    cp.add_argument("dest")

    rm = sub.add_parser("rm", help="Recursively remove PATH (missing is not an error)")
    rm.add_argument("path")

    exists = sub.add_parser("exists", help="Exit 0 if PATH exists, 1 if it does not")
    exists.add_argument("path")

    url = sub.add_parser("public-url", help="Print the normalized public URL (defaults to STAGEFS_PUBLIC_URL)")
    url.add_argument("url", nargs="?")

    return parser


async def main(args: argparse.Namespace) -> int:
    try:
        if args.command == "exists":
            return 0 if await path_exists(args.path) else 1

        if args.command == "copy":
            with spinner("copy") as progress:
                progress.set_message(f"{args.src} -> {args.dest}")
                await copy_dir_recursive(args.src, args.dest)
        elif args.command == "rm":
            with spinner("rm") as progress:
                progress.set_message(args.path)
                await remove_dir_all(args.path)
    except (StageFsError, OSError) as err:
        print(f"{ERROR} {err}", file=sys.stderr)
        return 2
    finally:
        shutdown_executor()

    print(f"{SUCCESS} {args.command} done", file=sys.stderr)
    return 0


def run(argv: list[str] | None = None) -> int:
    install_exception_hooks()
    args = build_parser().parse_args(argv)

    if args.command == "public-url":
        print(config.PUBLIC_URL if args.url is None else parse_public_url(args.url))
        return 0

    try:
        return asyncio.run(main(args))
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(run())

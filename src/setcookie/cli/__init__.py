"""setcookie CLI: decode Set-Cookie header values to JSON.

Entry point registered as ``setcookie`` in ``pyproject.toml``::

    [project.scripts]
    setcookie = "setcookie.cli:main"

Header values come from the command line, or from stdin (one per line)
when none are given::

    setcookie 'id=a3fWa; Max-Age=2592000; Secure'
    curl -sI https://example.com | sed -n 's/^set-cookie: //Ip' | setcookie --map
"""

import argparse
import logging
import sys

from setcookie.cli._output import dump_cookies


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``setcookie`` command."""
    parser = argparse.ArgumentParser(
        prog="setcookie",
        description="Decode HTTP Set-Cookie header values into JSON records.",
    )
    parser.add_argument(
        "headers",
        nargs="*",
        help="Set-Cookie header values (read from stdin, one per line, when omitted)",
    )
    parser.add_argument(
        "--split",
        action="store_true",
        help="Split comma-joined values into individual cookies first",
    )
    parser.add_argument(
        "--no-decode",
        dest="decode_values",
        action="store_false",
        help="Keep cookie values percent-encoded",
    )
    parser.add_argument(
        "--map",
        dest="as_map",
        action="store_true",
        help="Output an object keyed by cookie name (last one wins)",
    )
    parser.add_argument(
        "--silent",
        action="store_true",
        help="Do not warn about values that cannot be decoded",
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug info on stderr",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)-8s - %(name)s - %(message)s",
        stream=sys.stderr,
    )

    from setcookie.collect import parse_all
    from setcookie.split import split_cookies_string

    values = args.headers or [line.rstrip("\r\n") for line in sys.stdin]
    if args.split:
        values = [cookie for value in values for cookie in split_cookies_string(value)]
    logging.getLogger("setcookie.cli").debug("parsing %d header value(s)", len(values))

    cookies = parse_all(
        values,
        decode_values=args.decode_values,
        as_map=args.as_map,
        silent=args.silent,
    )
    dump_cookies(cookies, sys.stdout, indent=args.indent)

"""Command line entrypoint for processing CodeBreaker PS2 code lists."""

import sys

from .api_codes import format_codes, parse_codes
from .engine import Codebreaker


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as handle:
        return handle.read()


def _write_output(path, text: str) -> None:
    if path is None or path == "-":
        sys.stdout.write(text)
        return
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)


def cli(argv=None) -> int:
    import argparse

    parser = argparse.ArgumentParser(prog="codebreaker", description="CodeBreaker PS2 code encryption")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("encrypt", "Encrypt a code list (CB v1, switching to v7 after a beefcode)"),
        ("decrypt", "Decrypt a code list encrypted with encrypt"),
        ("auto", "Decrypt a code list, detecting raw, v1 and v7 codes line by line"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "input",
            nargs="?",
            default="-",
            help="Code list file, one 'XXXXXXXX YYYYYYYY' per line (default: stdin)"
        )
        sub.add_argument(
            "-o", "--output",
            default=None,
            help="Where to write the result (default: stdout)"
        )
        sub.add_argument(
            "--v7",
            action="store_true",
            help="Start in CB v7 mode, as if B4336FA9 4DFEFB79 came first"
        )
        sub.add_argument(
            "--silent",
            action="store_true",
            help="Do not print the status line on stderr"
        )

    args = parser.parse_args(argv)

    try:
        codes = parse_codes(_read_input(args.input))
    except (OSError, ValueError) as exc:
        print(f"Failed to read code list: {exc}")
        return 1

    cb = Codebreaker.new_v7() if args.v7 else Codebreaker()
    if args.command == "encrypt":
        process = cb.encrypt_code
    elif args.command == "decrypt":
        process = cb.decrypt_code
    else:
        process = cb.auto_decrypt_code

    try:
        result = [process(addr, val) for addr, val in codes]
    except ValueError as exc:
        print(f"Failed to {args.command} code list: {exc}")
        return 1

    text = format_codes(result)
    try:
        _write_output(args.output, text + "\n" if text else text)
    except OSError as exc:
        print(f"Failed to write output: {exc}")
        return 1

    if not args.silent:
        print(f"{args.command}: {len(result)} codes, final scheme {cb.scheme.value}", file=sys.stderr)
    return 0


def main(argv=None) -> int:
    return cli(argv)


if __name__ == "__main__":
    raise SystemExit(main())

"""Command line entry point: Caesar encryption and modular exponentiation."""

from __future__ import annotations

import argparse

from cipherlab.classical import caesar_encrypt
from cipherlab.numtheory import power_mod


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cipherlab", description="Small cipher tools.")
    commands = parser.add_subparsers(dest="command", required=True)

    caesar = commands.add_parser("caesar", help="encrypt text with the Caesar cipher")
    caesar.add_argument("text")
    caesar.add_argument("shift", type=int)

    powmod = commands.add_parser("powmod", help="compute a^m mod n")
    powmod.add_argument("a", type=int)
    powmod.add_argument("m", type=int)
    powmod.add_argument("n", type=int)
    return parser


def main(argv=None) -> int:
    """Run the command line tool; return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        if args.command == "caesar":
            result = caesar_encrypt(args.text, args.shift)
        else:
            result = power_mod(args.a, args.m, args.n)
    except ValueError as exc:
        parser.error(str(exc))
    print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
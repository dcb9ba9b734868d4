"""The Command Line Interface for the utility, including Interactive elements.

A hybrid CLI/ICLI: operands and the subcommand may be given on the command line, anything missing is asked for
interactively unless `--non-interactive` is set.

Typical usage example:

    bezoututils solve 240 46
    bezoututils --width int32 shrink 120 23
    OR
    python -m bezoututils
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import pathlib
import sys
import typing

from pyasn1 import error

import bezoututils
from bezoututils.widths import ArithmeticOverflowError


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = str
    choices: list[str] | None = None
    default: typing.Any = None


help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in Bezout Utils.",
            choices=["solve", "shrink"],
        ),
    "solve":
        HelpData("Compute Bezout coefficients s, t with s*a + t*b = gcd(a, b)."),
    "shrink":
        HelpData("Reduce Bezout coefficients to the minimal pair, 0 <= s < |b/gcd|."),
    "a":
        HelpData(description="The first operand.", format=int),
    "b":
        HelpData(description="The second operand.", format=int),
    "width":
        HelpData(description="Integer width to compute in.", choices=list(bezoututils.WIDTHS), default="big"),
    "minimal":
        HelpData(description="Shrink the coefficients before printing.", format=bool, default=False),
    "output":
        HelpData(description="Also write the result to this file (PEM).", format=pathlib.Path),
    "result":
        HelpData(description="PEM file holding the result to shrink. Solves first if omitted.", format=pathlib.Path),
}

needs = {
    "solve": ("a", "b"),
    "shrink": ("a", "b"),
}

operands = argparse.ArgumentParser(add_help=False)
operands.add_argument("a", nargs="?", type=help_dict["a"].format, help=help_dict["a"].description)
operands.add_argument("b", nargs="?", type=help_dict["b"].format, help=help_dict["b"].description)
corep = argparse.ArgumentParser(prog="bezoututils")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {bezoututils.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--width",
                   "-w",
                   choices=help_dict["width"].choices,
                   default=help_dict["width"].default,
                   help=help_dict["width"].description)
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

solve = commands.add_parser("solve", parents=[operands], help=help_dict["solve"].description)
solve.add_argument("--minimal", "-m", action="store_true", help=help_dict["minimal"].description)
solve.add_argument("--output", "-o", type=help_dict["output"].format, help=help_dict["output"].description)
shrink = commands.add_parser("shrink", parents=[operands], help=help_dict["shrink"].description)
shrink.add_argument("--result", "-r", type=help_dict["result"].format, help=help_dict["result"].description)


def checkmodes(arg: str, non_interactive: bool):
    helper_data = help_dict[arg]
    if non_interactive:
        if helper_data.default is not None:
            return helper_data.default
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    return helper_data


def choice_handler(arg: str, non_interactive: bool, prntr: typing.Callable = print):
    helper_data = checkmodes(arg, non_interactive)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    for choice in helper_data.choices:
        if help_dict.get(choice, None):
            prntr(f"{choice} - {help_dict[choice].description}")
        else:
            prntr(choice)
    while True:
        ch = input(f"{arg}: ")
        if ch in helper_data.choices:
            return ch
        prntr("Please select an option from the list.")


def input_handler(arg: str, non_interactive: bool, prntr: typing.Callable = print):
    helper_data = checkmodes(arg, non_interactive)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify {arg}!")
    prntr("Description: " + helper_data.description)
    cls = helper_data.format
    while True:
        ch = input(f"{arg}: ")
        if ch == "":
            prntr("Please provide a value.")
            continue
        try:
            return cls(ch)
        except ValueError:
            prntr(f"We could not convert your value to {cls.__name__}.")


def run(args: argparse.Namespace) -> int:
    """Executes a fully specified subcommand, returning the exit status."""
    match args.subcommand:
        case "solve":
            solver = bezoututils.solve_minimal if args.minimal else bezoututils.solve
            res = solver(args.a, args.b, args.width)
            if res is None:
                print("(0, 0) has no Bezout coefficients.", file=sys.stderr)
                return 1
            if args.output is not None:
                bezoututils.export_result(args.output, res)
            print(res)
        case "shrink":
            if args.result is not None:
                res = bezoututils.import_result(args.result)
            else:
                res = bezoututils.solve(args.a, args.b, args.width)
                if res is None:
                    print("(0, 0) has no Bezout coefficients.", file=sys.stderr)
                    return 1
            print(bezoututils.shrink(res, args.a, args.b, args.width))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args(argv)
    if not args.subcommand:
        args.subcommand = choice_handler("subcommand", args.non_interactive)
        args.minimal, args.output, args.result = False, None, None
    for reqs in needs[args.subcommand]:
        if getattr(args, reqs, None) is None:
            setattr(args, reqs, input_handler(reqs, args.non_interactive))
    try:
        return run(args)
    except ArithmeticOverflowError as exc:
        print(f"Overflow: {exc}. Try a wider --width.", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    except (OSError, error.PyAsn1Error) as exc:
        print(f"Result file error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())

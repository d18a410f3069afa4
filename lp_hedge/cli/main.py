"""Main CLI entry point"""

import sys
import json
import shlex
import logging
import argparse

from ..core.exceptions import LPCalcError
from ..calculator.controller import CalculatorController
from ..calculator.fields import FIELDS, lookup_field
from ..calculator.render import render_result, render_error, render_fields


INTERACTIVE_HELP = """Commands:
  set <field> <value>   Edit a field (e.g. set token1_price 0.75)
  calc                  Validate and calculate
  show                  Show current field values
  help [field]          Show this help, or help for one field
  reset                 Restore default values
  quit                  Leave the calculator"""


def print_outcome(controller, as_json=False):
    """Print the result panel or the error panel, whichever is current"""
    if controller.result is not None:
        if as_json:
            print(json.dumps(controller.result.to_dict(), indent=2, allow_nan=False))
        else:
            print(render_result(controller.result))
    elif controller.error:
        if as_json:
            print(json.dumps({
                "error": controller.error,
                "errors": controller.errors,
                "fields": controller.error_fields,
            }, indent=2))
        else:
            print(render_error(controller.error))


def cmd_calculate(args):
    """Calculate position, hedge and price range from options"""
    controller = CalculatorController()

    for spec in FIELDS:
        value = getattr(args, spec.name)
        if value is not None:
            controller.set_field(spec.name, value)

    result = controller.calculate()
    print_outcome(controller, as_json=args.json)
    return 0 if result is not None else 1


def cmd_fields(args):
    """List form fields with their defaults and help text"""
    controller = CalculatorController()
    print(render_fields(controller.form))
    return 0


def cmd_interactive(args):
    """Line-oriented form session"""
    controller = CalculatorController()
    print("Token Pair LP Calculator (type 'help' for commands)")

    while True:
        try:
            line = input("> ")
        except EOFError:
            print()
            break

        try:
            parts = shlex.split(line)
        except ValueError as e:
            print(render_error(e))
            continue
        if not parts:
            continue

        command, rest = parts[0].lower(), parts[1:]

        if command in ("quit", "exit"):
            break
        elif command == "help":
            if rest:
                spec = lookup_field(rest[0])
                if spec is None:
                    print(render_error(f"Unknown field: {rest[0]}"))
                else:
                    print(f"{spec.render_label(controller.form.token1_symbol, controller.form.token2_symbol)}: {spec.help}")
            else:
                print(INTERACTIVE_HELP)
        elif command == "set":
            if not rest:
                print(render_error("Usage: set <field> <value>"))
                continue
            try:
                controller.set_field(rest[0], " ".join(rest[1:]))
            except LPCalcError as e:
                print(render_error(e))
        elif command == "calc":
            controller.calculate()
            print_outcome(controller)
        elif command == "show":
            print(render_fields(controller.form))
        elif command == "reset":
            controller.reset()
            print("Defaults restored.")
        else:
            print(render_error(f"Unknown command: {command}"))

    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        prog="lp-hedge",
        description="Liquidity Provider Position Calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  lp-hedge calculate
  lp-hedge calculate --token1-symbol S --token2-symbol WETH \\
      --token1-price 0.7110 --token2-price 2500 --total-liquidity 10000
  lp-hedge calculate --upper-bound 10 --lower-bound 5 --json
  lp-hedge fields
  lp-hedge interactive
""",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    # calculate
    calc_parser = subparsers.add_parser("calculate", help="Size an LP position and its hedge")
    for spec in FIELDS:
        calc_parser.add_argument(
            "--" + spec.name.replace("_", "-"),
            dest=spec.name,
            metavar="VALUE" if spec.numeric else "SYMBOL",
            help=f"{spec.help} (default: {spec.default})",
        )
    calc_parser.add_argument("--json", action="store_true", help="Print result as JSON")
    calc_parser.set_defaults(func=cmd_calculate)

    # fields
    fields_parser = subparsers.add_parser("fields", help="List input fields and defaults")
    fields_parser.set_defaults(func=cmd_fields)

    # interactive
    interactive_parser = subparsers.add_parser("interactive", help="Edit fields and calculate interactively")
    interactive_parser.set_defaults(func=cmd_interactive)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        code = args.func(args)
    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)
    except LPCalcError as e:
        print(render_error(e))
        sys.exit(1)

    sys.exit(code)


if __name__ == "__main__":
    main()

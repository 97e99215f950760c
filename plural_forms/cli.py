"""
Command line interface for plural-forms.

Inspect the plural rule table from a shell:

    plural-forms count pl
    plural-forms index ar 0 1 2 11 100
    plural-forms header ru
    plural-forms list --format yaml
"""

import argparse
import logging
import os
import sys

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from plural_forms import __version__
from plural_forms.exceptions import UnknownLocaleError
from plural_forms.pluralization import form_count, form_index, known_locales, plural_forms_header
from plural_forms.table import PLURAL_RULES

logger = logging.getLogger(__name__)

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

LOG_LEVEL_ENV = "PLURAL_FORMS_LOG_LEVEL"


def _table_rows() -> list[dict]:
    rows = []
    for locale in known_locales():
        rule = PLURAL_RULES[locale]
        rows.append(
            {
                "locale": locale,
                "family": rule.name,
                "nplurals": rule.nplurals,
                "expression": rule.expression,
            }
        )
    return rows


def cmd_count(args: argparse.Namespace) -> int:
    console.print(form_count(args.locale))
    return 0


def cmd_index(args: argparse.Namespace) -> int:
    for count in args.counts:
        console.print(f"{count}\t{form_index(args.locale, count)}")
    return 0


def cmd_header(args: argparse.Namespace) -> int:
    console.print(plural_forms_header(args.locale), markup=False, soft_wrap=True)
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    """Dump the whole table as a rich table, JSON or YAML."""
    rows = _table_rows()

    if args.format == "json":
        console.print_json(data=rows)
        return 0

    if args.format == "yaml":
        console.print(yaml.safe_dump(rows, sort_keys=False), markup=False, soft_wrap=True)
        return 0

    table = Table(show_header=True, header_style="bold cyan", box=None)
    table.add_column("Locale", style="green")
    table.add_column("Family")
    table.add_column("Forms", justify="right")
    table.add_column("Plural-Forms expression")

    for row in rows:
        table.add_row(row["locale"], row["family"], str(row["nplurals"]), row["expression"])

    console.print(table)
    console.print(f"[dim]{len(rows)} locales[/dim]")
    return 0


def _non_negative_int(value: str) -> int:
    try:
        count = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid count: {value!r}") from None
    if count < 0:
        raise argparse.ArgumentTypeError(f"count must be >= 0, got {count}")
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plural-forms",
        description="Inspect gettext plural form rules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  plural-forms count pl
  plural-forms index ar 0 1 2 11 100
  plural-forms header ru
  plural-forms list --format json

Environment Variables:
  {LOG_LEVEL_ENV}  Logging level (default: WARNING)
""",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV, "WARNING"),
        help=f"Logging level (default: ${LOG_LEVEL_ENV} or WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    count_parser = subparsers.add_parser("count", help="Show the number of plural forms")
    count_parser.add_argument("locale", help="Locale code (e.g. pl, pt_BR)")
    count_parser.set_defaults(func=cmd_count)

    index_parser = subparsers.add_parser("index", help="Show the plural form index of counts")
    index_parser.add_argument("locale", help="Locale code")
    index_parser.add_argument("counts", nargs="+", type=_non_negative_int, help="Counts")
    index_parser.set_defaults(func=cmd_index)

    header_parser = subparsers.add_parser("header", help="Show the gettext Plural-Forms header")
    header_parser.add_argument("locale", help="Locale code")
    header_parser.set_defaults(func=cmd_header)

    list_parser = subparsers.add_parser("list", help="List every known locale")
    list_parser.add_argument(
        "--format", choices=["table", "json", "yaml"], default="table", help="Output format"
    )
    list_parser.set_defaults(func=cmd_list)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except UnknownLocaleError as e:
        logger.debug(f"Command '{args.command}' failed: {e}")
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())

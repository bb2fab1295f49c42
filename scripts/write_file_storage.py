#!/usr/bin/env python3

"""Write various data types to an XML, YAML or JSON file."""

import sys

from cvtutorials.cli import TUTORIAL_ERRORS, make_parser, parse_args, print_error
from cvtutorials.persistence import read_demo_data, write_demo_data


def _main(args: list[str] | None = None) -> int:
    parser = make_parser(
        "Write data to file v1.0.0. File will be XML, YAML or JSON.", display=False
    )
    parser.add_argument(
        "--path",
        required=True,
        help="Full path and file name to save data to "
        "(must include extension e.g. .xml, .yaml, .json)",
    )
    parser.add_argument("--developer", default="Rodney", help="Name of developer")
    parsed = parse_args(parser, args)

    print("\nWriting data to file...")
    try:
        write_demo_data(parsed.path, parsed.developer)
        data = read_demo_data(parsed.path)
    except TUTORIAL_ERRORS as e:
        return print_error(e)

    print(f"\nFinished writing data to file {parsed.path}")
    print("\nRead back:")
    for key, value in data.items():
        print(f"  {key}: {value}")
    print()
    return 0


if __name__ == "__main__":
    sys.exit(_main())

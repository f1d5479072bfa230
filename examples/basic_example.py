#!/usr/bin/env python3
"""
Example script demonstrating the usage of zarg.

Try running it with:
    python basic_example.py --name run1 -t 21.5 -v --tag a --tag b input.csv -- --not-a-flag
"""

import sys

from zarg import ArgError, Boolean, Number, String, parse

SPEC = {
    "--name": String,
    "--temperature": Number,
    "--verbose": Boolean,
    "--tag": [String],
    # Short aliases
    "-n": "--name",
    "-t": "--temperature",
    "-v": "--verbose",
}


def main() -> None:
    """Main function demonstrating the parser."""
    try:
        args = parse(None, SPEC)
    except ArgError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)

    print("zarg Example")
    print("=" * 50)
    print(f"Name: {args.get('--name')}")
    print(f"Temperature: {args.get('--temperature')}")
    print(f"Verbose: {args.get('--verbose', False)}")
    print(f"Tags: {args.get('--tag', [])}")
    print(f"Positionals: {args['_']}")


if __name__ == "__main__":
    main()

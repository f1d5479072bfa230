#!/usr/bin/env python3
"""
Example demonstrating an unknown-option handler and safe_parse.

Flags that are not in the specification are handed to the handler: flags
starting with "--x-" are recorded as enabled, all others are passed through to
the positionals so they can be forwarded to another program.
"""

from result import Err, Ok

from zarg import Number, Parser


def passthrough(flag):
    if flag.startswith("--x-"):
        return True
    return None


if __name__ == "__main__":
    parser = Parser({"--jobs": Number, "-j": "--jobs"}, passthrough)

    # Simulate parsing arguments (replace with `None` to use CLI args)
    args = ["-j", "4", "--x-fast", "build", "--color", "--", "-j", "1"]

    match parser.safe_parse(args):
        case Ok(value):
            print(f"jobs: {value['--jobs']}")
            print(f"experimental fast mode: {value.get('--x-fast', False)}")
            print(f"forwarded: {value['_']}")
        case Err(message):
            print(f"error: {message}")

    # A missing value is reported instead of raised
    print(parser.safe_parse(["--jobs"]))

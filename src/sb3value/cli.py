"""Command-line interface for inspecting runtime values.

Usage:
    sb3value <literal>...            # Show how each literal coerces
    sb3value <literal>... --sort     # Show literals ordered by Value.compare
    sb3value <literal>... --lark     # Show number grammar parse tree for text

Literals are read as JSON, so `1.5` is a number, `true` a boolean and
`"1.5"` text. Anything that is not valid JSON is taken as text as-is. Put
`--` before literals that start with a dash, such as `-Infinity`.
"""

import argparse
import json
import sys

import lark
from lark import Token, Tree

import sb3value


def decode_literal(text):
    """Decode a command-line literal into a Value.

    Args:
        text: (str) JSON literal, or raw text
    Returns:
        (Value) Decoded value
    Raises:
        LiteralError: If the JSON is not a number, string or boolean
    """
    try:
        literal = json.loads(text)
    except json.JSONDecodeError:
        literal = text
    return sb3value.Value.from_python(literal)


def describe(value):
    """Summarize every coercion of a value on one line."""
    try:
        text = repr(value.to_cow_str())
    except sb3value.EvalError as e:
        text = f"<{e}>"
    index = value.to_index()
    return (
        f"{value!r:<24} bool={value.to_bool()!s:<5} num={value.try_to_num()!r:<10} "
        f"str={text} index={index!r}"
    )


def prettylark(node, indent=0):
    """Pretty-print a Lark parse tree."""
    prefix = "  " * indent

    if isinstance(node, Token):
        print(f"{prefix}{node.type}: {node.value!r}")
    elif isinstance(node, Tree):
        print(f"{prefix}{node.data}:")
        for child in node.children:
            prettylark(child, indent + 1)
    else:
        print(f"{prefix}??? {type(node).__name__}: {node!r}")


def show_lark(value):
    """Show how the number grammar sees a text value."""
    print(repr(value))
    if not value.is_string:
        print("  (not text)")
        return
    text = value.data.strip(sb3value.WHITESPACE)
    try:
        tree = sb3value.number_tree(text)
    except lark.exceptions.LarkError as e:
        print(f"  no parse: {type(e).__name__}")
        return
    prettylark(tree, 1)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="sb3value",
        description="Show how block project values coerce")
    parser.add_argument("literals", nargs="+", metavar="literal",
        help="JSON literal (number, string, boolean) or raw text")
    parser.add_argument("--sort", action="store_true",
        help="Print the values ordered by Value.compare")
    parser.add_argument("--lark", action="store_true",
        help="Show the number grammar parse tree for text values")

    args = parser.parse_args(argv)
    if args.sort and args.lark:
        parser.error("--sort cannot be combined with --lark")

    values = []
    for literal in args.literals:
        try:
            values.append(decode_literal(literal))
        except sb3value.LiteralError as e:
            print(f"Error: {e.message}: {literal}", file=sys.stderr)
            sys.exit(1)

    if args.lark:
        for value in values:
            show_lark(value)
        return

    if args.sort:
        try:
            values = sorted(values, key=sb3value.sort_key)
        except sb3value.EvalError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        for value in values:
            print(value.to_cow_str())
        return

    for value in values:
        print(describe(value))


if __name__ == "__main__":
    main()

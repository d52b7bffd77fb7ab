"""
minic CLI Entrypoint.

This module provides the command-line interface for running the minic front end
over a statement. It supports token dumps, tree rendering, JSON output, and an
interactive REPL.

Features:
    - Read source from `.mc` files or inline strings.
    - Lex and parse the statement, then print the syntax tree.
    - Optionally list the tokens before the tree, or print the tree as JSON.
    - Launch an interactive REPL with optional verbosity.

Example usage:
    minic decl.mc
    minic -s "int result = 10 + 20;" --tokens
    minic -s "int x = 1 - 2;" --json
    minic --repl --verbose

Functions:
    run_minic(source: str, is_string: bool = False, show_tokens: bool = False,
              as_json: bool = False) -> int:
        Executes the full pipeline (lex → parse → print) and returns an exit status.

    main(argv: list[str] | None = None) -> None:
        Parses CLI arguments and invokes the appropriate action (REPL or run).
"""

import argparse
import sys

from minic.minic_lexer import tokenize
from minic.minic_parser import Parser
from minic.minic_printer import render_json, render_tokens, render_tree


def run_minic(
    source: str,
    is_string: bool = False,
    show_tokens: bool = False,
    as_json: bool = False,
) -> int:
    """
    Run the minic front end: lex, parse, and print the result.

    Args:
        source (str): The minic source code or path to a `.mc` file.
        is_string (bool): If True, treats `source` as raw code instead of a file path.
        show_tokens (bool): If True, lists every token before the tree.
        as_json (bool): If True, prints the tree as indented JSON instead of text.

    Returns:
        int: 0 on success, 1 if parsing failed.

    Raises:
        ValueError: If `is_string` is False and the source does not end with '.mc'.
        OSError: If the source file cannot be read.
    """
    if not is_string and not source.endswith(".mc"):
        raise ValueError("Only .mc files are supported.")
    # 1. Read source
    if not is_string:
        with open(source, encoding="utf-8") as f:
            source = f.read()

    print(f"Input Code:\n{source}\n")

    # 2. Lexing
    tokens = tokenize(source)
    if show_tokens:
        print(f"Tokens:\n{render_tokens(tokens)}\n")

    # 3. Parsing
    result = Parser(tokens).parse()
    if not result:
        print(f"Error: {result.message}", file=sys.stderr)
        print("Parsing failed.", file=sys.stderr)
        return 1

    # 4. Output
    tree = result.unwrap()
    print("Parser Output (Abstract Syntax Tree):")
    if as_json:
        print(render_json(tree))
    else:
        print(render_tree(tree))
    return 0


def main(argv: list[str] | None = None) -> None:
    """
    Entry point for the minic CLI.

    Parses command-line arguments and dispatches to the appropriate mode:
    - Launches the REPL if no arguments are passed or `--repl` is specified.
    - Otherwise, runs the front end over the given source and exits with its status.

    Supported flags:
        - `-s`, `--string`: Interpret source as a raw string instead of a file path.
        - `--tokens`: List tokens before the tree.
        - `--json`: Print the tree as JSON.
        - `--repl`: Launch the interactive REPL.
        - `--verbose`: Show tokens for each statement in the REPL.
    """
    argv = sys.argv[1:] if argv is None else argv
    parser = argparse.ArgumentParser(prog="minic")
    parser.add_argument("source", nargs="?", help="Filename or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument(
        "--tokens", action="store_true", help="List tokens before the syntax tree"
    )
    parser.add_argument(
        "--json", dest="as_json", action="store_true", help="Print the tree as JSON"
    )
    parser.add_argument(
        "--repl",
        action="store_true",
        help="Launch interactive REPL instead of parsing a source",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Verbose REPL mode (if --repl)"
    )

    args = parser.parse_args(argv)

    if args.string and args.source is None:
        parser.error("the following arguments are required: source")

    if args.repl or args.source is None:
        from minic.minic_repl import start_repl

        start_repl(verbose=args.verbose)
        return

    try:
        sys.exit(
            run_minic(
                source=args.source,
                is_string=args.string,
                show_tokens=args.tokens,
                as_json=args.as_json,
            )
        )
    except (ValueError, OSError) as e:
        parser.error(str(e))


if __name__ == "__main__":
    main()

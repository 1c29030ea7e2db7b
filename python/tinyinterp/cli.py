from __future__ import annotations
import sys
import argparse
import logging
from typing import List, Optional, Tuple

from .abstract_syntax_tree import AndExpr, BooleanConstant, BooleanVariableRef, OrExpr
from .environment import Environment, Value
from .errors import EvaluationError, LexerError, ParserError
from .evaluator import interpret, interpret_boolean, run_script, stream_sink
from .formatting import format_environment, format_expression, format_table, format_value
from .lexer import is_number_literal
from .parser import parse_script
from .postfix import parse_expression
from .query import OrderBy, SelectAll, Table, Where, run_query

package_logger = logging.getLogger("tinyinterp")

DEMO_SCRIPT = """
// Simple script example
x = 10
y = 20
result = x + y
print result
message = "Hello"
print message
"""


def parse_binding(text: str) -> Tuple[str, Value]:
    """
    Parse a ``name=value`` command line binding.

    Numeric literals become numbers, ``true``/``false`` become booleans,
    anything else is kept as text.
    """
    name, sep, raw = text.partition("=")
    name = name.strip()
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {text!r}")
    raw = raw.strip()
    if is_number_literal(raw):
        return name, float(raw)
    if raw.lower() in ("true", "false"):
        return name, raw.lower() == "true"
    return name, raw


def run_file(path: str) -> Environment:
    with open(path, "r", encoding="utf-8") as f:
        src = f.read()
    env = Environment()
    run_script(parse_script(src), env, stream_sink(sys.stdout))
    return env


def run_rpn(source: str, bindings: List[Tuple[str, Value]], show_tree: bool) -> Value:
    expr = parse_expression(source)
    if show_tree:
        print(format_expression(expr))
    env = Environment()
    for name, value in bindings:
        env.set_variable(name, value)
    result = interpret(expr, env)
    print(format_value(result))
    return result


def run_demo() -> None:
    print("1. Mathematical Expression Evaluation:")
    env = Environment()
    env.set_variable("x", 10)
    env.set_variable("y", 5)
    expr = parse_expression("x y + 3 *")
    print(f"{format_expression(expr)} = {format_value(interpret(expr, env))}")

    print("\n2. Boolean Expression Evaluation:")
    env = Environment()
    env.set_variable("isLoggedIn", True)
    env.set_variable("hasPermission", False)
    access = OrExpr(
        BooleanVariableRef("isLoggedIn"),
        AndExpr(BooleanVariableRef("hasPermission"), BooleanConstant(True)),
    )
    print(f"Access granted: {format_value(interpret_boolean(access, env))}")

    print("\n3. Table Query Evaluation:")
    table = Table()
    table.add_row({"name": "Alice", "age": 30, "city": "Paris"})
    table.add_row({"name": "Bob", "age": 25, "city": "Lyon"})
    table.add_row({"name": "Carol", "age": 35, "city": "Paris"})
    query = OrderBy(Where(SelectAll(), "age", ">", 26), "age", ascending=False)
    print(format_table(run_query(query, table)))

    print("\n4. Simple Script Interpretation:")
    env = Environment()
    run_script(parse_script(DEMO_SCRIPT), env, stream_sink(sys.stdout))
    print(format_environment(env.variables()))


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="tinyinterp",
        description="Postfix expressions, boolean logic and a tiny scripting language.",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="trace evaluation on stderr")
    sub = ap.add_subparsers(dest="command", required=True)

    p_run = sub.add_parser("run", help="execute a script file")
    p_run.add_argument("file", help="path to a script")

    p_rpn = sub.add_parser("rpn", help="evaluate a postfix expression")
    p_rpn.add_argument("expression", help='e.g. "x y + 3 *"')
    p_rpn.add_argument(
        "--var", dest="bindings", action="append", default=[], type=parse_binding,
        metavar="NAME=VALUE", help="bind a variable (repeatable)",
    )
    p_rpn.add_argument("--show-tree", action="store_true", help="print the parsed tree first")

    sub.add_parser("demo", help="run the built-in examples")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    """
    Command line entry point.
    Returns an exit code:
      0 = success
      1 = unreadable file or lexing/parsing error
      2 = evaluation error
    """
    args = build_arg_parser().parse_args(argv)

    handler = None
    if args.verbose:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        package_logger.addHandler(handler)
        package_logger.setLevel(logging.DEBUG)

    try:
        if args.command == "run":
            run_file(args.file)
        elif args.command == "rpn":
            run_rpn(args.expression, args.bindings, args.show_tree)
        else:
            run_demo()
        return 0

    except OSError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except (LexerError, ParserError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except EvaluationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    finally:
        if handler is not None:
            package_logger.removeHandler(handler)
            package_logger.setLevel(logging.NOTSET)

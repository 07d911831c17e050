#!/usr/bin/env python3
"""
Expression demo

Builds a few sample trees and one environment, then prints
display = format = value for each tree.
"""
import argparse
from typing import Dict, List, Mapping, Optional, Sequence

from .expression_tree import (
    Expression, ConstantNode, VariableNode, AddNode, MultiplyNode, SubtractNode,
    ExpressionValidator
)
from .merge import merge_sorted
from .logging_system import LogLevel, configure_logging, log_milestone, log_warning


def sample_expressions() -> List[Expression]:
    return [
        Expression(ConstantNode(17)),
        Expression(AddNode(ConstantNode(3), VariableNode('a'))),
        Expression(AddNode(MultiplyNode(VariableNode('b'), ConstantNode(9)), VariableNode('a'))),
    ]


def sample_environment() -> Dict[str, int]:
    # Same order java.util.HashMap prints these keys in
    return {'a': 3, 'b': 111, 'c': 78, 'baf': 666}


def simplification_samples() -> List[Expression]:
    x = VariableNode('x')
    return [
        Expression(MultiplyNode(ConstantNode(1), VariableNode('b'))),
        Expression(SubtractNode(ConstantNode(5), ConstantNode(5))),
        Expression(AddNode(MultiplyNode(ConstantNode(0), x), ConstantNode(0))),
        Expression(MultiplyNode(AddNode(x, ConstantNode(0)),
                                SubtractNode(ConstantNode(4), ConstantNode(0)))),
    ]


def format_environment(env: Mapping[str, int]) -> str:
    return "{" + ", ".join(f"{name}={value}" for name, value in env.items()) + "}"


def describe(expr: Expression, env: Mapping[str, int]) -> str:
    return f"{expr.display()} = {expr.format(env)} = {expr.evaluate(env)}"


def run_expression_demo(expressions: Sequence[Expression], env: Mapping[str, int]) -> None:
    print(f"Env: {format_environment(env)}")
    for expr in expressions:
        missing = ExpressionValidator.missing_variables(expr.root, env)
        if missing:
            log_warning(f"Skipping {expr.display()}: unbound {', '.join(missing)}")
            continue
        print(describe(expr, env))


def run_simplify_demo(expressions: Sequence[Expression]) -> None:
    print("\nSimplified:")
    for expr in expressions:
        print(f"  {expr.display()} => {expr.simplify().display()}")


def run_merge_demo() -> None:
    print(f"\nMerged: {merge_sorted([1, 3, 5, 7, 9], [2, 4, 6, 8, 10])}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Arithmetic expression tree demo")
    parser.add_argument("--simplify", action="store_true", help="Also print simplified sample trees")
    parser.add_argument("--merge", action="store_true", help="Also print the sorted-merge example")
    parser.add_argument("--log-level", default="minimal",
                        choices=[level.name.lower() for level in LogLevel],
                        help="Logging verbosity")
    parser.add_argument("--log-file", default=None, help="Also write log records to this file")
    args = parser.parse_args(argv)

    configure_logging(log_level=LogLevel[args.log_level.upper()],
                      log_to_file=args.log_file is not None,
                      log_file_path=args.log_file)

    log_milestone("Evaluating sample expressions")
    run_expression_demo(sample_expressions(), sample_environment())

    if args.simplify:
        log_milestone("Simplifying sample expressions")
        run_simplify_demo(simplification_samples())

    if args.merge:
        run_merge_demo()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

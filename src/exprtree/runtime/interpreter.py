import sys
from typing import TextIO, overload

from lark.exceptions import LarkError

from ..frontend.ast_expressions import Expression
from ..frontend.parser import parse_expression
from .core import RuntimeContext
from .expression_evaluator import evaluate


def run_for_cli(
    source: str,
    context: RuntimeContext | None = None,
    stderr: TextIO | None = None,
) -> str | None:
    stream = stderr if stderr is not None else sys.stderr

    try:
        expr = parse_expression(source)
    except (LarkError, TypeError, ValueError) as error:
        print(f"Syntax error: {error}", file=stream)
        return None
    except Exception as error:
        print(f"Syntax error (host): {error}", file=stream)
        return None

    try:
        return run(expr, context)
    except Exception as error:
        print(f"Runtime error: {error!r}", file=stream)
        return None


@overload
def run(source_or_expr: Expression, context: RuntimeContext | None = None) -> str: ...


@overload
def run(source_or_expr: str, context: RuntimeContext | None = None) -> str: ...


def run(
    source_or_expr: Expression | str, context: RuntimeContext | None = None
) -> str:
    if isinstance(source_or_expr, str):
        expr = parse_expression(source_or_expr)
    else:
        expr = source_or_expr

    return evaluate(expr, context or RuntimeContext())

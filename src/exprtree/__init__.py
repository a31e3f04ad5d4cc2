from .frontend.ast_expressions import Binary, Expression, Factor, MalformedExpression
from .frontend.parser import parse_expression
from .frontend.semantic import SemanticError, validate_tree
from .runtime.core import RuntimeContext
from .runtime.expression_evaluator import evaluate, evaluate_iterative
from .runtime.interpreter import run, run_for_cli

__all__ = [
    "Binary",
    "Expression",
    "Factor",
    "MalformedExpression",
    "RuntimeContext",
    "SemanticError",
    "evaluate",
    "evaluate_iterative",
    "parse_expression",
    "run",
    "run_for_cli",
    "validate_tree",
]

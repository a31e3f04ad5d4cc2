from ..frontend.ast_expressions import Binary, Expression, Factor
from .core import RuntimeContext


def evaluate(expr: Expression, context: RuntimeContext | None = None) -> str:
    """Render the structure of `expr` as text.

    Leaves render as their decimal value and every Binary node as
    ``B[<left>#<right>]``. Nothing is computed: the result describes the
    shape of the tree, not an arithmetic value.
    """
    return eval_expr(expr, context or RuntimeContext())


def eval_expr(expr: Expression, context: RuntimeContext) -> str:
    if isinstance(expr, Factor):
        return str(expr.i)

    if isinstance(expr, Binary):
        with context.writer.nested():
            left_text = eval_expr(expr.left, context)
            right_text = eval_expr(expr.right, context)
        result = f"B[{left_text}#{right_text}]"
        context.writer.binary_step(left_text, right_text, result)
        return result

    raise TypeError(f"Unsupported expression type: {type(expr).__name__}")


def evaluate_iterative(
    expr: Expression, context: RuntimeContext | None = None
) -> str:
    """Same rendering as `evaluate`, without using the Python call stack."""
    context = context or RuntimeContext()
    # Work items are either a node still to visit or a pending "#"/"]" marker.
    pending: list[Expression | str] = [expr]
    parts: list[str] = []
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, Factor):
            parts.append(str(item.i))
        elif isinstance(item, Binary):
            parts.append("B[")
            pending.extend(("]", item.right, "#", item.left))
        else:
            raise TypeError(f"Unsupported expression type: {type(item).__name__}")

    result = "".join(parts)
    context.writer.iterative_result(result)
    return result

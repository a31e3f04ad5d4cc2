from .ast_expressions import Binary, Expression, Factor


class SemanticError(ValueError):
    """Raised when an expression graph is not a strict tree."""


def validate_tree(expr: Expression) -> None:
    """Check that no node object is reachable more than once.

    A node seen twice is either a subtree shared by two parents or part of a
    cycle; both break exclusive ownership of children.
    """
    seen: set[int] = set()
    pending: list[Expression] = [expr]
    while pending:
        node = pending.pop()
        if id(node) in seen:
            raise SemanticError(
                f"{type(node).__name__} node reachable more than once"
            )
        seen.add(id(node))

        if isinstance(node, Binary):
            pending.append(node.right)
            pending.append(node.left)
        elif not isinstance(node, Factor):
            raise TypeError(f"Unsupported expression type: {type(node).__name__}")


def tree_depth(expr: Expression) -> int:
    """Count Binary nodes along the longest root-to-leaf path.

    Raises SemanticError if `expr` is not a strict tree.
    """
    validate_tree(expr)
    deepest = 0
    pending: list[tuple[Expression, int]] = [(expr, 0)]
    while pending:
        node, depth = pending.pop()
        if isinstance(node, Binary):
            pending.append((node.left, depth + 1))
            pending.append((node.right, depth + 1))
        else:
            deepest = max(deepest, depth)
    return deepest


def nesting_depth(text: str) -> int:
    deepest = 0
    depth = 0
    for char in text:
        if char == "[":
            depth += 1
            deepest = max(deepest, depth)
        elif char == "]":
            depth -= 1
    return deepest

from typing import Sequence

from .frontend.ast_expressions import Binary, Expression, Factor


def build_tutorial_tree() -> Binary:
    # B[B[1#2]#B[3#4]]
    return Binary(
        Binary(Factor(1), Factor(2)),
        Binary(Factor(3), Factor(4)),
    )


def build_left_chain(n: int, leaf: int = 0) -> Expression:
    # n = 2: Binary(Binary(Factor(leaf), Factor(leaf + 1)), Factor(leaf + 2))
    if n < 0:
        raise ValueError(f"chain length must be non-negative, got {n}")

    expr: Expression = Factor(leaf)
    for offset in range(1, n + 1):
        expr = Binary(expr, Factor(leaf + offset))
    return expr


def build_balanced_tree(values: Sequence[int]) -> Expression:
    if not values:
        raise ValueError("a tree needs at least one leaf")

    if len(values) == 1:
        return Factor(values[0])

    middle = len(values) // 2
    return Binary(
        build_balanced_tree(values[:middle]),
        build_balanced_tree(values[middle:]),
    )

from .ast_programs import build_tutorial_tree
from .frontend.ast_expressions import Binary, Expression, Factor

# (title, tree, expected rendering) for each example in the tutorial text.
TUTORIAL_SCENARIOS: list[tuple[str, Expression, str]] = [
    ("single factor", Factor(1), "1"),
    ("binary of two factors", Binary(Factor(1), Factor(2)), "B[1#2]"),
    ("nested binaries", build_tutorial_tree(), "B[B[1#2]#B[3#4]]"),
    ("negative leaf", Binary(Factor(0), Factor(-5)), "B[0#-5]"),
]


def constructor_source(*, spaced: bool = True) -> str:
    separator = ", " if spaced else ","
    return (
        f"Binary(Binary(Factor(1){separator}Factor(2)){separator}"
        f"Binary(Factor(3){separator}Factor(4)))"
    )

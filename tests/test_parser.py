import pytest
from lark import UnexpectedInput

from exprtree.ast_programs import build_balanced_tree, build_left_chain
from exprtree.frontend.ast_expressions import Binary, Factor
from exprtree.frontend.parser import parse_expression, parse_tree
from exprtree.frontend.semantic import tree_depth
from exprtree.runtime.expression_evaluator import evaluate, evaluate_iterative
from exprtree.snippets import TUTORIAL_SCENARIOS, constructor_source


# ===== Constructor Notation =====
def test_parse_single_factor() -> None:
    assert parse_expression("Factor(1)") == Factor(1)


def test_parse_negative_factor() -> None:
    assert parse_expression("Factor(-5)") == Factor(-5)


@pytest.mark.parametrize("spaced", [True, False])
def test_parse_nested_constructors(spaced: bool) -> None:
    expr = parse_expression(constructor_source(spaced=spaced))
    assert expr == Binary(
        Binary(Factor(1), Factor(2)),
        Binary(Factor(3), Factor(4)),
    )


def test_whitespace_is_ignored() -> None:
    source = """
    Binary(
        Factor( 1 ),
        Factor(2)
    )
    """
    assert parse_expression(source) == Binary(Factor(1), Factor(2))


# ===== Rendered Notation =====
def test_parse_bare_integer_as_factor() -> None:
    assert parse_expression("-12") == Factor(-12)


@pytest.mark.parametrize(
    "text",
    [expected for _, _, expected in TUTORIAL_SCENARIOS],
)
def test_rendered_text_reads_back_to_same_rendering(text: str) -> None:
    assert evaluate(parse_expression(text)) == text


def test_rendered_text_reads_back_to_equal_tree() -> None:
    tree = build_balanced_tree([3, -1, 4, 1, -5])
    assert parse_expression(evaluate(tree)) == tree
    chain = build_left_chain(6, leaf=-3)
    assert parse_expression(evaluate(chain)) == chain


def test_notations_can_be_mixed() -> None:
    assert parse_expression("B[Factor(1)#Binary(2, 3)]") == Binary(
        Factor(1), Binary(Factor(2), Factor(3))
    )


# ===== Syntax Errors =====
@pytest.mark.parametrize(
    "source",
    [
        "",
        "Factor()",
        "Factor(1.5)",
        "Binary(Factor(1))",
        "B[1#2",
        "B[1,2]",
        "Unary(Factor(1))",
        "Factor(1) Factor(2)",
    ],
)
def test_malformed_sources_are_rejected(source: str) -> None:
    with pytest.raises(UnexpectedInput):
        parse_tree(source)


# ===== Deep Trees =====
def test_spaces_inside_rendered_binary_are_ignored() -> None:
    assert parse_expression("B [ 1 # B [2#3] ]") == Binary(
        Factor(1), Binary(Factor(2), Factor(3))
    )


def test_very_deep_rendering_reads_back() -> None:
    # compared through evaluate_iterative since dataclass __eq__ recurses
    text = evaluate_iterative(build_left_chain(5000))
    expr = parse_expression(text)
    assert evaluate_iterative(expr) == text
    assert tree_depth(expr) == 5000

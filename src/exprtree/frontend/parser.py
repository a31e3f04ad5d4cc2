from functools import lru_cache
from importlib.resources import files
from typing import Any, cast

from lark import Lark, Token, Transformer, Tree

from .ast_expressions import Binary, Expression, Factor


class AstTransformer(Transformer[Token, object]):
    def start(self, children: list[object]) -> Expression:
        [expr] = children
        return self._as_expression(expr)

    def factor(self, children: list[object]) -> Factor:
        [number] = children
        assert isinstance(number, Token)
        return Factor(int(str(number)))

    def binary(self, children: list[object]) -> Binary:
        [left, right] = children
        return Binary(self._as_expression(left), self._as_expression(right))

    def _as_expression(self, value: object) -> Expression:
        assert isinstance(value, Expression)
        return value


def _load_grammar_text() -> str:
    grammar_file = files("exprtree.frontend").joinpath("grammar.lark")
    return grammar_file.read_text(encoding="utf-8")


@lru_cache(maxsize=1)
def get_parser() -> Lark:
    grammar = _load_grammar_text()
    return Lark(grammar, start="start", parser="lalr")


@lru_cache(maxsize=1)
def get_expression_parser() -> Lark:
    # Nodes are built by the LALR loop as rules reduce, so nesting depth is
    # not bounded by the recursion limit.
    grammar = _load_grammar_text()
    return Lark(grammar, start="start", parser="lalr", transformer=AstTransformer())


def parse_tree(source: str) -> Tree[Token]:
    parser: Any = get_parser()
    tree = parser.parse(source)
    return cast(Tree[Token], tree)


def parse_expression(source: str) -> Expression:
    parser: Any = get_expression_parser()
    expr = parser.parse(source)
    assert isinstance(expr, Expression)
    return expr

from dataclasses import dataclass


class MalformedExpression(TypeError):
    """Raised when an expression node is built from invalid parts."""


class Expression:
    pass


@dataclass(frozen=True, slots=True)
class Factor(Expression):
    i: int

    def __post_init__(self) -> None:
        # bool is an int subclass but never a valid leaf
        if not isinstance(self.i, int) or isinstance(self.i, bool):
            raise MalformedExpression(
                f"Factor expects an int, got {type(self.i).__name__}"
            )


@dataclass(frozen=True, slots=True)
class Binary(Expression):
    left: Expression
    right: Expression

    def __post_init__(self) -> None:
        for side in ("left", "right"):
            child = getattr(self, side)
            if not isinstance(child, Expression):
                raise MalformedExpression(
                    f"Binary.{side} must be an Expression, got {type(child).__name__}"
                )

from .runtime.core import RuntimeContext
from .runtime.expression_evaluator import evaluate
from .snippets import TUTORIAL_SCENARIOS
from .writer import TraceWriter


def run_demo(writer: TraceWriter | None = None) -> None:
    writer = writer or TraceWriter()
    context = RuntimeContext(writer=writer)

    writer.section("STRUCTURAL EVALUATION")
    for title, expr, _ in TUTORIAL_SCENARIOS:
        writer.section(f"{title}: {expr}")
        writer.println(f" -> {evaluate(expr, context)}")


if __name__ == "__main__":
    run_demo()

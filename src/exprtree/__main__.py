import sys

from .runtime.interpreter import run_for_cli


def main(argv: list[str] | None = None) -> int:
    sources = sys.argv[1:] if argv is None else argv
    if not sources:
        sources = [line for line in sys.stdin.read().splitlines() if line.strip()]

    failed = False
    for source in sources:
        rendered = run_for_cli(source)
        if rendered is None:
            failed = True
        else:
            print(rendered)

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())

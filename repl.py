import argparse
import sys
from pathlib import Path

from linecalc.errors import CalcError
from linecalc.interpreter import Interpreter

parser = argparse.ArgumentParser(prog="linecalc", description="Line-oriented expression and assignment evaluator.")
parser.add_argument("source", nargs="?", help="file to run line by line; omit for an interactive prompt")


def run_file(path: Path) -> int:
    interpreter = Interpreter()
    try:
        interpreter.run_source(path.read_text(encoding="utf-8"))
    except CalcError as e:
        print(e, file=sys.stderr)
        return 1
    return 0


def run_interactive() -> None:
    interpreter = Interpreter()

    while True:
        try:
            line = input("> ")
        except EOFError:
            break

        try:
            interpreter.run_line(line)
        except CalcError as e:
            print(e)
            print("(variables cleared)")
            interpreter = Interpreter()


def main() -> None:
    args = parser.parse_args()
    if args.source is None:
        run_interactive()
        return
    source_path = Path(args.source)
    if not source_path.is_file():
        print(f"File not found: {args.source}", file=sys.stderr)
        sys.exit(1)
    sys.exit(run_file(source_path))


if __name__ == "__main__":
    main()

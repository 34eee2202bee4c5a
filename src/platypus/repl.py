"""Interactive REPL for the Platypus language.

Every line is run against the same interpreter, so variables, functions
and classes defined on one line stay available to the following ones.
"""

__all__ = ["Repl", "repl"]

import sys

import platypus


class Repl:
    """State for one REPL session.

    Args:
        max_depth: (int) Call depth limit for the session's interpreter
    """

    def __init__(self, max_depth=platypus.DEFAULT_MAX_DEPTH):
        self.interp = platypus.Interpreter(max_depth=max_depth)

    def eval_line(self, line: str):
        """Run one line of input.

        Returns:
            Text to echo for the line, or None when there is nothing to show

        Raises:
            ParseError: Line is not valid Platypus
            EvalError: The line failed while running
        """
        value = self.interp.evaluate_source(line)
        if value is None:
            return None
        return platypus.format_value(value)


def _error_printer(rich):
    if not rich:
        def show(message):
            print(f"Error: {message}", file=sys.stderr)
        return show

    from rich.console import Console
    from rich.markup import escape

    console = Console(stderr=True)

    def show(message):
        console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    return show


def repl(rich=False, max_depth=platypus.DEFAULT_MAX_DEPTH):
    """Run the interactive REPL until `exit` or end of input."""
    print(f"Platypus REPL v{platypus.__version__}")
    print("Type 'exit' or press Ctrl+D to quit")
    print()

    session = Repl(max_depth=max_depth)
    show_error = _error_printer(rich)

    while True:
        try:
            line = input(">> ")
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print("\nKeyboardInterrupt")
            continue

        line = line.strip()
        if line == "exit":
            break
        if not line:
            continue

        try:
            output = session.eval_line(line)
        except (platypus.ParseError, platypus.EvalError) as e:
            show_error(str(e))
            continue
        if output is not None:
            print(output)

    print("Goodbye!")

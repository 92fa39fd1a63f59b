import sys
import logging
import asyncio
from typing import Any, Dict, List, Optional

import profiling
from algorithms import ALGORITHMS, lookup
from command_parser import CommandError, CommandParser
from config import get_settings
from demos import DEMOS, factorial_with_trace
from validation import RecursionLabError

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

class RecursionLab:
    """Interactive console that runs the recursion library one command at a time."""

    def __init__(self):
        """Initialize Recursion Lab with its parser and settings."""
        self.settings = get_settings()
        logging.getLogger().setLevel(self.settings.log_level)
        self.command_parser = CommandParser()
        logger.info(
            "Recursion Lab initialized (max depth %d, %s %d-bit overflow)",
            self.settings.max_depth, self.settings.overflow_policy, self.settings.int_bits
        )

    def process_run_command(self, name: str, arg_text: str) -> Any:
        """Run one algorithm and print its result."""
        algorithm = lookup(name)
        if algorithm is None:
            print(f"Unknown algorithm: {name}")
            print("Type 'list' to see available algorithms.")
            return None

        args = self.command_parser.parse_arguments(algorithm.params, arg_text)
        result = algorithm.func(*args)
        logger.info("%s%s = %r", algorithm.name, tuple(args), result)
        print(f"{algorithm.name}({', '.join(repr(a) for a in args)}) = {result!r}")
        return result

    def process_search_command(self, target: int, values: List[int]) -> int:
        """Binary search a sorted list, checking the ordering first."""
        index = ALGORITHMS['binary_search'].func(values, target, check_sorted=True)
        if index < 0:
            print(f"{target} not found in {values}")
        else:
            print(f"{target} found at index {index}")
        return index

    def process_compare_command(self, name: str, arg_text: str) -> Optional[profiling.Comparison]:
        """Compare the recursive and iterative forms of an algorithm."""
        algorithm = lookup(name)
        if algorithm is None:
            print(f"Unknown algorithm: {name}")
            return None
        if algorithm.iterative is None:
            print(f"{algorithm.name} has no iterative counterpart to compare with.")
            return None

        args = self.command_parser.parse_arguments(algorithm.params, arg_text)
        comparison = profiling.compare(algorithm.func, algorithm.iterative, *args)
        print(comparison.summary())
        return comparison

    def process_trace_command(self, n: int) -> int:
        """Log the call stack of factorial(n)."""
        result = factorial_with_trace(n)
        print(f"factorial({n}) = {result}")
        return result

    def process_demo_command(self, topic: str) -> None:
        """Run a walkthrough by topic name."""
        demo = DEMOS.get(topic)
        if demo is None:
            print(f"Unknown demo '{topic}'. Available demos: {', '.join(DEMOS)}")
            return
        demo()

    def process_list_command(self) -> None:
        """Print the algorithm catalog grouped by family."""
        print("\nAlgorithms:")
        print("-" * 72)
        print(f"{'Name':<20} {'Family':<20} {'Arguments':<12} {'Description'}")
        print("-" * 72)

        for algorithm in sorted(ALGORITHMS.values(), key=lambda a: (a.family, a.name)):
            params = " ".join(algorithm.params)
            print(f"{algorithm.name:<20} {algorithm.family:<20} {params:<12} {algorithm.summary}")

    def process_help_command(self) -> None:
        """Process a help command by displaying help text."""
        help_text = self.command_parser.get_help_text()
        print(f"\n{help_text}")

    def process_unknown_command(self, text: str) -> None:
        """Process an unknown command."""
        print(f"Unknown command: {text}")
        print("Type 'help' to see available commands.")

    def execute(self, parsed_command: Dict[str, Any]) -> None:
        """Dispatch a parsed command. Library and argument errors propagate."""
        command_type = parsed_command['command']

        if command_type == 'run':
            self.process_run_command(parsed_command['algorithm'], parsed_command['args'])
        elif command_type == 'search':
            self.process_search_command(parsed_command['target'], parsed_command['values'])
        elif command_type == 'compare':
            self.process_compare_command(parsed_command['algorithm'], parsed_command['args'])
        elif command_type == 'trace':
            self.process_trace_command(parsed_command['n'])
        elif command_type == 'demo':
            self.process_demo_command(parsed_command['topic'])
        elif command_type == 'list':
            self.process_list_command()
        elif command_type == 'help':
            self.process_help_command()
        elif command_type == 'unknown':
            self.process_unknown_command(parsed_command.get('text', ''))

    def process_command(self, command: str) -> bool:
        """
        Parse and process a command.

        Returns:
            False when the user asked to quit, True otherwise
        """
        try:
            parsed_command = self.command_parser.parse(command)
        except CommandError as e:
            print(f"Error: {e}")
            return True

        if parsed_command['command'] == 'quit':
            return False

        try:
            self.execute(parsed_command)
        except (CommandError, RecursionLabError) as e:
            logger.warning("Command '%s' failed: %s", command, e)
            print(f"Error: {e}")
        return True

    def run(self):
        """Run the interactive command loop."""
        print("\nWelcome to Recursion Lab")
        print("Type 'help' for available commands")

        async def main_loop():
            while True:
                try:
                    command = input("\nEnter command: ").strip()
                except EOFError:
                    print("Goodbye!")
                    break
                if not command:
                    continue

                if not await asyncio.to_thread(self.process_command, command):
                    print("Goodbye!")
                    break
        asyncio.run(main_loop())

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application.

    With arguments, runs them as a single command and exits; without, starts
    the interactive loop.
    """
    argv = sys.argv[1:] if argv is None else argv
    try:
        app = RecursionLab()
        if argv:
            command = " ".join(argv)
            parsed_command = app.command_parser.parse(command)
            app.execute(parsed_command)
            return 1 if parsed_command['command'] == 'unknown' else 0
        app.run()
    except (CommandError, RecursionLabError) as e:
        logger.error("Command failed: %s", e)
        print(f"Error: {str(e)}")
        return 1
    except ValueError as e:
        logger.error(f"Fatal error: {e}")
        print(f"Fatal error: {str(e)}")
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())

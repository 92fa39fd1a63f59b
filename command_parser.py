import re
import logging
from typing import Any, Dict, List, Sequence

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

class CommandError(ValueError):
    """Command text that cannot be turned into a call."""
    pass

class CommandParser:
    """Parses text commands for the Recursion Lab console."""

    def __init__(self):
        """Initialize the command parser with command patterns."""
        # Order matters: the generic 'run' pattern must come last
        self.command_patterns = {
            'help': r'^(?:help|commands|\?)$',
            'quit': r'^(?:quit|exit|bye)$',
            'list': r'^(?:list|algorithms)$',
            'demo': r'^demo\s+(\w+)$',
            'trace': r'^trace\s+(?:factorial\s+)?(-?\d+)$',
            'compare': r'^compare\s+(\w+)\s*(.*)$',
            'search': r'^(?:search|find)\s+(-?\d+)\s+in\s+\[?([-\d,\s]*?)\]?$',
            'run': r'^(\w+)\s*(.*)$'
        }
        logger.info("CommandParser initialized with %d command patterns", len(self.command_patterns))

    def parse(self, text: str) -> Dict[str, Any]:
        """
        Parse text input into a structured command.

        Args:
            text: User input text

        Returns:
            Dictionary containing command type and parameters
        """
        text = text.strip()
        logger.debug("Parsing command: %s", text)

        for cmd_type, pattern in self.command_patterns.items():
            match = re.match(pattern, text, re.IGNORECASE)
            if match:
                logger.debug("Matched command type: %s", cmd_type)

                if cmd_type == 'demo':
                    return {
                        'command': cmd_type,
                        'topic': match.group(1).lower()
                    }
                elif cmd_type == 'trace':
                    return {
                        'command': cmd_type,
                        'n': int(match.group(1))
                    }
                elif cmd_type in ('compare', 'run'):
                    return {
                        'command': cmd_type,
                        'algorithm': match.group(1).lower(),
                        'args': match.group(2).strip()
                    }
                elif cmd_type == 'search':
                    return {
                        'command': cmd_type,
                        'target': int(match.group(1)),
                        'values': self.parse_int_list(match.group(2))
                    }
                else:
                    return {'command': cmd_type}

        logger.warning("Unknown command: %s", text)
        return {'command': 'unknown', 'text': text}

    def parse_int_list(self, text: str) -> List[int]:
        """Parse '3,9,2' (brackets and spaces allowed) into a list of ints."""
        text = text.strip().strip('[]')
        if not text.strip():
            return []
        try:
            return [int(part) for part in text.split(',')]
        except ValueError:
            raise CommandError(f"Expected comma-separated integers, got '{text}'")

    def parse_arguments(self, kinds: Sequence[str], text: str) -> List[Any]:
        """
        Convert the argument text of a command into typed values.

        Args:
            kinds: Argument kinds from the algorithm catalog
            text: Everything after the algorithm name

        Returns:
            List of converted arguments, one per kind
        """
        tokens = text.split()
        args = []

        for position, kind in enumerate(kinds):
            remaining = len(kinds) - position - 1
            if kind == 'text':
                # Free text takes every token not needed by later arguments
                take = len(tokens) - remaining
                if take < 0:
                    raise CommandError("Not enough arguments")
                args.append(' '.join(tokens[:take]))
                tokens = tokens[take:]
                continue

            if not tokens:
                raise CommandError(f"Missing {kind} argument")
            token = tokens.pop(0)

            if kind == 'int':
                try:
                    args.append(int(token))
                except ValueError:
                    raise CommandError(f"Expected an integer, got '{token}'")
            elif kind == 'ints':
                args.append(self.parse_int_list(token))
            elif kind == 'char':
                if len(token) != 1:
                    raise CommandError(f"Expected a single character, got '{token}'")
                args.append(token)
            else:
                raise CommandError(f"Unknown argument kind '{kind}'")

        if tokens:
            raise CommandError(f"Unexpected extra arguments: {' '.join(tokens)}")
        return args

    def get_help_text(self) -> str:
        """Return help text with available commands."""
        help_text = "Available commands:\n"
        help_text += "  - <algorithm> <args>: Run an algorithm, e.g. 'factorial 5' or 'max 3,9,2'\n"
        help_text += "  - search <target> in <values>: Binary search a sorted list\n"
        help_text += "  - compare <algorithm> <args>: Recursive vs iterative calls and timing\n"
        help_text += "  - trace factorial <n>: Show the call stack of factorial(n)\n"
        help_text += "  - demo basics|patterns|iteration|limits: Run a walkthrough\n"
        help_text += "  - list: Show all algorithms\n"
        help_text += "  - help: Show this help text\n"
        help_text += "  - quit: Exit the program"
        return help_text

import argparse
import sys


AVAILABLE_FILTERS_HELP = "Available filters: EVEN, ODD, GT<n>"


class UsageArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def __init__(self, *args, usage_epilog=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.usage_epilog = usage_epilog

    def error(self, message):
        self.print_usage(sys.stderr)
        if self.usage_epilog:
            print(self.usage_epilog, file=sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def parse_args_for_processing(argv=None):
    parser, options_group = shared_args(usage_epilog=AVAILABLE_FILTERS_HELP)
    parser.description = "Filter integers read from a text file"

    parser.add_argument(
        "filter",
        help="Filter to apply: EVEN, ODD or GT<n> (e.g. GT10)",
    )

    parser.add_argument(
        "file",
        help="Text file of whitespace-separated integers",
    )

    output_group = parser.add_argument_group("Output")
    output_group.add_argument(
        "-o",
        "--output",
        help="Also write the accepted numbers to this file as jsonlines",
    )

    # extra trailing arguments are ignored; only missing ones are an error
    args, extra = parser.parse_known_args(argv)
    return args


def parse_args_for_logger_demo(argv=None):
    parser, options_group = shared_args()
    parser.description = "Demonstrate switching log output between sinks"

    parser.add_argument(
        "sink",
        nargs="?",
        help="Initial sink: console, file or none (default: console)",
    )

    args, extra = parser.parse_known_args(argv)
    return args


def shared_args(usage_epilog=None):
    parser = UsageArgumentParser(usage_epilog=usage_epilog)

    options_group = parser.add_argument_group("General options")

    options_group.add_argument(
        "-l",
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
        help="Set the logging level (default: INFO)",
    )

    return parser, options_group

from .arg_parser import parse_args_for_logger_demo
from .logger import setup_logger
from .sinks import SinkLogger, SinkType, parse_sink_type
import sys


def run_demo(sink_logger, sink_type):
    sink_logger.set_sink(sink_type)
    sink_logger.log("First test message.")
    sink_logger.log("Second test message.")
    sink_logger.set_sink(SinkType.FILE)
    sink_logger.log("Message to file.")
    sink_logger.set_sink(SinkType.NONE)
    sink_logger.log("This message should go nowhere.")
    sink_logger.set_sink(SinkType.CONSOLE)
    sink_logger.log("Back to console output.")


def main(argv=None):

    args = parse_args_for_logger_demo(argv)
    setup_logger(args.log_level)

    sink_type = SinkType.CONSOLE
    if args.sink is not None:
        sink_type = parse_sink_type(args.sink)
        print(f"Command line argument received: {args.sink}")
    else:
        print("No command line argument provided. Using default console output.")

    with SinkLogger() as sink_logger:
        run_demo(sink_logger, sink_type)

    print("Program finished.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

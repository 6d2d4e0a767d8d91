from .arg_parser import parse_args_for_processing
from .filters import FilterArgumentError, FilterFactory, parse_filter_spec
from .io import FileReader, OutputWriter
from .logger import logger, setup_logger
from .observers import CountObserver, JsonlObserver, PrintObserver
from .processing_framework import NumberProcessor
from contextlib import ExitStack
import sys


def main(argv=None):

    args = parse_args_for_processing(argv)
    setup_logger(args.log_level)

    spec = parse_filter_spec(args.filter)
    factory = FilterFactory()

    try:
        number_filter = factory.create_from_spec(spec)
    except FilterArgumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info(f"Filtering {args.file} with {args.filter}")

    with ExitStack() as stack:
        observers = [PrintObserver(), CountObserver()]
        if args.output:
            output_writer = stack.enter_context(OutputWriter(args.output))
            observers.append(JsonlObserver(output_writer))

        processor = NumberProcessor(FileReader(), number_filter, observers)
        processor.run(args.file)

    return 0


if __name__ == "__main__":
    sys.exit(main())

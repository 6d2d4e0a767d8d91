from .common import parse_int
from .logger import logger
import jsonlines


class OutputWriter:
    def __init__(self, output_path):
        self.output_path = output_path
        self.writer = None
        self.n_written = 0

    def __enter__(self):
        logger.info(f"Writing output to {self.output_path}")
        self.writer = jsonlines.open(self.output_path, mode="w", flush=True)
        return self

    def write_data(self, data):
        self.writer.write(data)
        self.n_written += 1

    def __exit__(self, exc_type, exc_val, exc_tb):
        logger.debug(f"Closing {self.output_path}")
        if self.writer:
            self.writer.close()
            self.writer = None


class FileReader:
    """Reads whitespace-separated integers from a text file."""

    def read(self, file_path):
        return read_numbers(file_path)


def read_numbers(file_path):
    """
    Read integers from a text file, in file order.

    Tokens that are not integers, or that fall outside the 32-bit range,
    are skipped with a warning. Bytes that aren't valid UTF-8 are decoded
    as U+FFFD, so they land in tokens that fail to parse. OSError
    propagates if the file can't be opened.
    """
    numbers = []
    logger.debug(f"Reading numbers from {file_path}")
    with open(file_path, "rt", encoding="utf-8", errors="replace") as f:
        for line in f:
            for token in line.split():
                try:
                    numbers.append(parse_int(token))
                except OverflowError:
                    logger.warning(
                        f"Number out of range in file: {token}. Skipping."
                    )
                except ValueError:
                    logger.warning(f"Invalid number in file: {token}. Skipping.")
    return numbers

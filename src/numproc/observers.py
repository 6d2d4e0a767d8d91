"""
Observers notified by NumberProcessor for each kept number and at the end of a run.
"""

from abc import ABC, abstractmethod
from .logger import logger


class NumberObserver(ABC):
    """Base class for number observers."""

    @abstractmethod
    def on_number(self, number):
        """Handle one number that passed the filter."""
        pass

    @abstractmethod
    def on_finished(self):
        """Handle the end of the number stream."""
        pass


class PrintObserver(NumberObserver):
    def on_number(self, number):
        print(f"Read and filtered number: {number}")

    def on_finished(self):
        print("Number processing finished.")


class CountObserver(NumberObserver):
    def __init__(self):
        self.count = 0

    def on_number(self, number):
        self.count += 1

    def on_finished(self):
        print(f"Total number of filtered numbers: {self.count}")


class JsonlObserver(NumberObserver):
    """Writes each kept number as a jsonlines record through an OutputWriter."""

    def __init__(self, output_writer):
        self.output_writer = output_writer

    def on_number(self, number):
        self.output_writer.write_data({"number": number})

    def on_finished(self):
        logger.info(
            f"Wrote {self.output_writer.n_written} numbers to "
            f"{self.output_writer.output_path}"
        )

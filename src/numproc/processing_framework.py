"""
Reader -> filter -> observer pipeline for integers read from text files.
"""

from .logger import logger


class NumberProcessor:
    """
    Runs numbers from a reader through a filter and fans the kept ones out
    to observers.

    The reader is any object with a read(path) method returning a list of
    ints. Observers are borrowed for the run and notified in list order.
    """

    def __init__(self, reader, number_filter, observers):
        self.reader = reader
        self.number_filter = number_filter
        self.observers = list(observers)
        self.stats = {"n_numbers": 0, "n_kept": 0}

    def run(self, file_path):
        """
        Process one file. Returns False if the file could not be read.

        On a read failure the observers are not told the stream finished.
        """
        self.stats = {"n_numbers": 0, "n_kept": 0}
        try:
            numbers = self.reader.read(file_path)
        except OSError as e:
            logger.error(f"Error during processing: {e}")
            return False

        for number in numbers:
            self.stats["n_numbers"] += 1
            if self.number_filter.keep(number):
                self.stats["n_kept"] += 1
                self.notify_observers(number)

        logger.info(f"Processed {self.stats['n_numbers']} numbers")
        logger.info(f"Kept {self.stats['n_kept']} numbers")

        self.notify_finished()
        return True

    def notify_observers(self, number):
        for observer in self.observers:
            self._notify(observer, "on_number", number)

    def notify_finished(self):
        for observer in self.observers:
            self._notify(observer, "on_finished")

    def _notify(self, observer, event, *args):
        try:
            getattr(observer, event)(*args)
        except Exception:
            logger.exception(
                f"Observer {type(observer).__name__} failed in {event}"
            )

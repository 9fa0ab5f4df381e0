import logging

import pycounter

logger = logging.getLogger("count_to_ten")


if __name__ == "__main__":
    pycounter.setup_logging(debug=True)

    counter = pycounter.Counter()

    for _ in range(10):
        counter.increment()

    logger.info(f"Counted to {counter.get_count()}.")

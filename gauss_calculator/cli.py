import argparse
import json
import sys
from multiprocessing import Process, Queue

from gauss_calculator.calculator import calculate_gauss_method
from gauss_calculator.gauss_method import GAUSS_POINTS


def logger_process(queue, path):
    """Writes each evaluation record as one JSON line until it gets None."""
    while True:
        log_data = queue.get()
        if log_data is None:
            break
        with open(path, "a") as log_file:
            log_file.write(json.dumps(log_data) + "\n")


class CalculatorSession:
    def __init__(self, a, b, n, samples, point_count, normalize_input, log_queue=None):
        self.a = a
        self.b = b
        self.n = n
        self.samples = samples
        self.point_count = point_count
        self.normalize_input = normalize_input
        self.log_queue = log_queue

    def handle(self, function):
        calculation = calculate_gauss_method(
            function, self.a, self.b, self.n,
            samples=self.samples,
            point_count=self.point_count,
            normalize_input=self.normalize_input,
        )

        print(f"f(x) = {function}")
        print(f"Result: {calculation.display}")
        if calculation.samples is not None:
            for x, y in calculation.samples:
                print(f"{x:.8f}\t{y:.8f}")

        if self.log_queue is not None:
            log_data = {
                "function": function,
                "a": self.a,
                "b": self.b,
                "n": self.n,
                "result": calculation.result,
                "time_execution": calculation.time_execution,
                "date": calculation.date,
            }
            self.log_queue.put(log_data)

        return calculation


def build_parser():
    parser = argparse.ArgumentParser(description="Gauss-Legendre definite integral calculator")
    parser.add_argument("function", nargs="+", help="Function of x, e.g. \"x^2 + 2x + 1\"")
    parser.add_argument("-a", type=float, default=0.0, help="Lower limit")
    parser.add_argument("-b", type=float, default=1.0, help="Upper limit")
    parser.add_argument("-n", type=int, default=2, choices=sorted(GAUSS_POINTS), help="Number of Gauss points")
    parser.add_argument("--samples", action="store_true", help="Print the sampled curve")
    parser.add_argument("--points", type=int, default=101, help="Number of curve samples")
    parser.add_argument("--raw", action="store_true", help="Do not rewrite ^ and implicit multiplication")
    parser.add_argument("--log-file", type=str, default=None, help="Append evaluations as JSON lines")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.points < 2:
        parser.error("--points must be at least 2")

    log_queue = None
    logger = None
    if args.log_file:
        log_queue = Queue()
        logger = Process(target=logger_process, args=(log_queue, args.log_file))
        logger.start()

    session = CalculatorSession(
        args.a, args.b, args.n, args.samples, args.points, not args.raw, log_queue,
    )

    failed = False
    try:
        for function in args.function:
            calculation = session.handle(function)
            failed = failed or calculation.result is None
    finally:
        if logger is not None:
            log_queue.put(None)
            logger.join()

    return 1 if failed else 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()

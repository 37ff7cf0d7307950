"""
Demonstration entry point.

Run:
    python -m logfacade

Output:
    [Program] - Logging an error
    [AnotherProgram] - Logging another error
"""

from logfacade.extensions import log_error
from logfacade.factory import LoggerFactory
from logfacade.provider import ConsoleLoggerProvider


class Program:
    pass


def main() -> int:
    factory = LoggerFactory(ConsoleLoggerProvider())

    logger1 = factory.create_logger(Program)
    # Specific provider:
    # logger1 = factory.create_logger(Program, provider_name="ConsoleLoggerProvider")
    log_error(logger1, "Logging an error")

    logger2 = factory.create_logger("AnotherProgram")
    log_error(logger2, "Logging another error")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

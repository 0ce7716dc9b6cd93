#!/usr/bin/env python3
"""Basic usage example"""

from transport_logger import ConsoleTransport, Logger, LogLevel, PlainFileTransport

logger = (Logger.create_instance("example")
    .add_transport(ConsoleTransport(minimum_level=LogLevel.DEBUG))
    .add_transport(PlainFileTransport(minimum_level=LogLevel.DEBUG, file_retention=1)))


def some_function():
    # Change the log format for only the console transport
    logger.transports[0].log_format = (
        "{time} | {level} | {name} | {fileName} | {functionName} | "
        "{lineNumber} | {columnNumber} | {content}"
    )
    logger.info("So much information")


def main():
    logger.debug("Some debug message with an object", {"user_id": "..."})
    logger.notice("Some notice message")
    logger.info("Some info message", "with", 4, "arguments")
    logger.success("Some success message")
    logger.warning("Some warning message")
    logger.error("Some error message")

    some_function()


if __name__ == "__main__":
    main()

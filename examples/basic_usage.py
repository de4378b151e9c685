#!/usr/bin/env python3
"""Basic usage example"""

import time

from timberlog import LoggerBuilder, LogLevel


def main():
    # Create logger with builder pattern
    logger = (LoggerBuilder("example")
        .with_level(LogLevel.DEBUG)
        .with_timestamp()
        .with_log_level()
        .with_default_colors()
        .with_console(colored=True)
        .with_file("logs/example.log")
        .build())

    # Log messages
    logger.error("This is error")
    logger.warn("This is warning")
    logger.event("User signed in")
    logger.info("Application started")
    logger.debug(lambda: f"Expensive state dump: {list(range(5))}")

    # Queued lines are cancelled on shutdown; give the worker a moment
    time.sleep(0.1)
    logger.shutdown()

    # Writers outlive the logger and are closed by their owner
    for writer in logger.config.writers:
        writer.close()


if __name__ == "__main__":
    main()

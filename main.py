"""Main entry point for the interactive password generator."""

import logging
import sys
from core.config.config import config
from generator.cli.shell import PasswordShell
from generator.services.batch_generator import PasswordBatchGenerator

logging.basicConfig(
    level=config.log_level(),
    format=config.LOG_FORMAT,
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Run the menu on stdin/stdout and return the process exit code."""
    generator = PasswordBatchGenerator()
    shell = PasswordShell(generator, sys.stdin, sys.stdout)
    exit_code = shell.run()
    logger.info(f"Password generator exited with code {exit_code}")
    return exit_code


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()

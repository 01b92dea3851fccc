"""Interactive GEN/EXIT menu around the batch generator."""

import logging
from typing import TextIO
from core.domain.consts import ExitCode, MenuCommand, Messages
from core.domain.errors import InputClosedError, MalformedInputError
from generator.cli.token_reader import TokenReader
from generator.services.batch_generator import PasswordBatchGenerator

logger = logging.getLogger(__name__)


class _BatchPrinter:
    """Emit callback that prints the batch header before the first password."""
    
    def __init__(self, out: TextIO, length: int, count: int) -> None:
        self.out = out
        self.length = length
        self.count = count
        self._header_printed = False
    
    def __call__(self, password: str) -> None:
        if not self._header_printed:
            print(Messages.BATCH_HEADER.format(count=self.count, length=self.length), file=self.out)
            self._header_printed = True
        print(password, file=self.out)


class PasswordShell:
    """
    Menu loop: read a command, dispatch GEN or EXIT, repeat.
    
    One request is fully handled before the next token is read. Bad
    commands and malformed numbers are reported and the loop continues;
    only a failure to close the input stream ends with a non-zero code.
    """
    
    def __init__(
        self,
        generator: PasswordBatchGenerator,
        stdin: TextIO,
        stdout: TextIO,
    ) -> None:
        self.generator = generator
        self.reader = TokenReader(stdin)
        self.out = stdout
    
    def run(self) -> int:
        """
        Run the menu until EXIT or end of input.
        
        Returns:
            ExitCode.OK on clean shutdown, ExitCode.INPUT_CLOSE_FAILED if the
            input stream could not be closed.
        """
        self._print(Messages.BANNER)
        self._print(Messages.CHARSET)
        
        while True:
            self._print(Messages.MENU_PROMPT)
            try:
                command = self.reader.next_token()
            except InputClosedError:
                logger.info("Input ended, shutting down")
                return self._shutdown()
            
            if command == MenuCommand.EXIT:
                return self._shutdown()
            elif command == MenuCommand.GEN:
                try:
                    self._generate()
                except MalformedInputError as e:
                    logger.debug(f"Discarded malformed token: {e}")
                    self._print(Messages.INVALID_NUMBER)
                except InputClosedError:
                    logger.info("Input ended during GEN, shutting down")
                    return self._shutdown()
            else:
                self._print(Messages.INVALID_COMMAND)
            self._print()
    
    def _generate(self) -> None:
        """Prompt for length and count, then run one batch."""
        self._print(Messages.LENGTH_PROMPT)
        length = self.reader.next_int()
        self._print(Messages.COUNT_PROMPT)
        count = self.reader.next_int()
        
        result = self.generator.generate(length, count, _BatchPrinter(self.out, length, count))
        if not result.ok:
            self._print(result.error_message or result.status.value)
    
    def _shutdown(self) -> int:
        try:
            self.reader.close()
        except (OSError, ValueError) as e:
            logger.error(f"Failed to close input stream: {e}")
            self._print(Messages.CLOSE_FAILED)
            return ExitCode.INPUT_CLOSE_FAILED
        self._print(Messages.CLOSED)
        return ExitCode.OK
    
    def _print(self, text: str = "") -> None:
        print(text, file=self.out)

"""Whitespace-delimited token reader for interactive input."""

import re
from collections import deque
from typing import Deque, TextIO
from core.domain.errors import InputClosedError, MalformedInputError

INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+$")


class TokenReader:
    """
    Reads one whitespace-delimited token at a time from a text stream.
    
    Several tokens may arrive on one line (e.g. "GEN 12 3"); they are
    handed out in order before the next line is read.
    """
    
    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self._pending: Deque[str] = deque()
    
    def next_token(self) -> str:
        """
        Return the next token, reading more lines as needed.
        
        Raises:
            InputClosedError: If the stream ends before a token is found
        """
        while not self._pending:
            line = self.stream.readline()
            if not line:
                raise InputClosedError("No more input")
            self._pending.extend(line.split())
        return self._pending.popleft()
    
    def next_int(self) -> int:
        """
        Return the next token as an integer.
        
        A malformed token is consumed, so the caller can report it and move on.
        
        Raises:
            MalformedInputError: If the token is not a decimal integer
            InputClosedError: If the stream has ended
        """
        token = self.next_token()
        if not INTEGER_PATTERN.match(token):
            raise MalformedInputError(token)
        try:
            return int(token)
        except ValueError:
            # longer than the interpreter's int string conversion limit
            raise MalformedInputError(token) from None
    
    def close(self) -> None:
        """Close the underlying stream and drop buffered tokens."""
        self._pending.clear()
        self.stream.close()

"""
Command line tokenization.

Splitting is deliberately naive: the line is split on every single space
character. There is no quoting, escaping or expansion, and the empty
words produced by consecutive spaces are kept.
"""

from dataclasses import dataclass, field
from typing import List, Optional

WORD_SEPARATOR = ' '
LINE_TERMINATOR = '\n'


def strip_terminator(line: str) -> str:
    """Remove a single trailing line-feed, if present."""
    if line.endswith(LINE_TERMINATOR):
        return line[:-1]
    return line


def tokenize(line: str) -> List[str]:
    """
    Split a command line into words.

    Examples:
        >>> tokenize('echo a b')
        ['echo', 'a', 'b']
        >>> tokenize('echo  a')
        ['echo', '', 'a']
        >>> tokenize('')
        []
    """
    if not line:
        return []
    return line.split(WORD_SEPARATOR)


@dataclass
class CommandLine:
    """A tokenized command line: command name plus arguments."""

    name: str
    args: List[str] = field(default_factory=list)

    @classmethod
    def parse(cls, line: str) -> Optional['CommandLine']:
        """
        Parse a raw input line.

        Returns:
            The parsed command, or None for an empty line
        """
        words = tokenize(strip_terminator(line))
        if not words:
            return None
        return cls(name=words[0], args=words[1:])

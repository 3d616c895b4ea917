"""parse-list - lazily parse newline-separated text into typed values.

Each line becomes one ``Ok(value)`` or ``Err(ParseListError)``. Failures are
per line: an unreadable or unparsable line does not stop iteration, and the
caller decides whether to skip, log, or fail fast.

Usage:
    from parse_list import from_file_lines, from_text
    from parse_list.parsing import unsigned_int

    with from_file_lines("numbers.txt", unsigned_int) as results:
        numbers = [r.unwrap() for r in results]  # raises on the first failure

    # Or keep only the lines that parsed
    numbers = list(from_text("0\\nboop\\n2", unsigned_int).ok_values())

Entry points, from most to least convenient:
    from_file_lines(path, parser)       opens the file (fails here if it can't)
    from_read_lines(stream, parser)     any byte stream
    from_bufread_lines(reader, parser)  buffered reader, binary or text
    from_text(text, parser)             in-memory string
    from_iter(line_results, parser)     Ok/Err line results, no filtering
"""

import logging

from parse_list.config import LineOptions
from parse_list.errors import IoFailure, ParseFailure, ParseListError
from parse_list.iterator import ParsedResult, ParseListIterator, Parser
from parse_list.lines import LineResult, is_nonblank, read_lines, without_blanks
from parse_list.result import Err, Ok, Result
from parse_list.sources import (
    from_bufread_lines,
    from_file_lines,
    from_iter,
    from_read_lines,
    from_text,
)

logging.getLogger("parse_list").addHandler(logging.NullHandler())

__all__ = [
    # Factories
    "from_file_lines",
    "from_read_lines",
    "from_bufread_lines",
    "from_text",
    "from_iter",
    # Iterator
    "ParseListIterator",
    "Parser",
    "ParsedResult",
    "LineOptions",
    # Results and errors
    "Ok",
    "Err",
    "Result",
    "ParseListError",
    "IoFailure",
    "ParseFailure",
    # Lines
    "LineResult",
    "read_lines",
    "is_nonblank",
    "without_blanks",
]
__version__ = "0.1.0"

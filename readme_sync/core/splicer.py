"""Splicing generated rows into the target document.

Three modes are supported:
- overwrite: the target is replaced by a fixed header and the rows
- section: everything before the section header is kept, the rest replaced
- table: only the data rows of one markdown table are replaced
"""

import re
from typing import List, Optional, Sequence, Tuple

from readme_sync.core.models import SpliceError

ROW_MARKER = "|"

# | --- | :---: | ---: |
TABLE_SEPARATOR = re.compile(r'^\|?\s*:?-+:?\s*(\|\s*:?-+:?\s*)*\|?$')

BOM = "\ufeff"


def _unwrap(content: str) -> Tuple[str, str, str]:
    """Split off a leading BOM and normalize CRLF line endings to LF."""
    bom = BOM if content.startswith(BOM) else ""
    content = content[len(bom):]
    newline = "\r\n" if "\r\n" in content else "\n"
    return bom, content.replace("\r\n", "\n"), newline


def _wrap(bom: str, content: str, newline: str) -> str:
    return bom + content.replace("\n", newline)


def overwrite_all(rows: Sequence[str], header: str, section_header: str) -> str:
    """Build a whole document from a fixed header followed by the rows."""
    body = "\n".join(rows)
    return f"{header}\n{section_header}\n\n{body}\n"


def replace_section(content: str, rows: Sequence[str], section_header: str) -> str:
    """Replace everything from the section header onward.

    Text before the first occurrence of the header is kept verbatim apart
    from trailing whitespace. Without a header the whole content is kept and
    the section is appended.
    """
    bom, content, newline = _unwrap(content)
    before = content.split(section_header, 1)[0].rstrip()
    section = f"{section_header}\n\n" + "\n".join(rows) + "\n"
    if before:
        section = f"{before}\n\n{section}"
    return _wrap(bom, section, newline)


def _separator_for(header_line: str) -> str:
    cells = header_line.strip().strip(ROW_MARKER).split(ROW_MARKER)
    return ROW_MARKER + ROW_MARKER.join(" --- " for _ in cells) + ROW_MARKER


def find_table_header(lines: List[str], table_header: str) -> Optional[int]:
    """Index of the first line equal to the header once trimmed, or None."""
    wanted = table_header.strip()
    for i, line in enumerate(lines):
        if line.strip() == wanted:
            return i
    return None


def replace_table(content: str, rows: Sequence[str], table_header: str) -> str:
    """Replace the data rows of the table introduced by ``table_header``.

    The header line and its separator line are kept once; the data rows run
    until the first line not starting with ``|`` and everything from there on
    is kept as well. A missing separator is generated from the header. A
    leading BOM and CRLF line endings are carried over to the result.

    Raises:
        SpliceError: If no line matches the table header
    """
    bom, content, newline = _unwrap(content)
    lines = content.split("\n")
    start = find_table_header(lines, table_header)
    if start is None:
        raise SpliceError(f"Table header not found: {table_header.strip()}")

    if start + 1 < len(lines) and TABLE_SEPARATOR.match(lines[start + 1].strip()):
        head = lines[:start + 2]
        search_from = start + 2
    else:
        head = lines[:start + 1] + [_separator_for(lines[start])]
        search_from = start + 1

    end = len(lines)
    for i in range(search_from, len(lines)):
        if not lines[i].strip().startswith(ROW_MARKER):
            end = i
            break

    return _wrap(bom, "\n".join(head + list(rows) + lines[end:]), newline)

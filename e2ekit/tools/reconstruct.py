"""Rebuild structured text (lines, paragraphs, links, search) from raw PDF pages.

Every function here is pure: it reads the document it is given and returns
fresh lists/sets/strings. The matching rules (line continuation, URL shape,
keyword search) live in small module-level objects so they can be swapped
or tested on their own.
"""
import re
from typing import Callable, Sequence, Union

from e2ekit.errors import InvalidPatternError, PageOutOfRangeError
from e2ekit.models.document import Document, Page


PAGE_BREAK = "\n\n--- Page Break ---\n\n"

# http(s):// followed by anything up to whitespace or a closing parenthesis
URL_PATTERN = re.compile(r"https?://[^\s)]+")

_CONTINUATION_RE = re.compile(r"^[a-z0-9]")

DocumentLike = Union[Document, Sequence[Page]]
LinePredicate = Callable[[str], bool]


def is_continuation_line(line: str) -> bool:
    """True if a cleaned line looks like it continues the previous one."""
    return _CONTINUATION_RE.match(line) is not None


def compile_keyword(keyword: Union[str, re.Pattern]) -> re.Pattern:
    """
    Compile a keyword into a case-insensitive regular expression.

    Pre-compiled patterns keep their own flags and gain IGNORECASE.

    Raises:
        InvalidPatternError: if the keyword is not valid regex syntax
    """
    if isinstance(keyword, re.Pattern):
        if keyword.flags & re.IGNORECASE:
            return keyword
        return re.compile(keyword.pattern, keyword.flags | re.IGNORECASE)
    try:
        return re.compile(keyword, re.IGNORECASE)
    except re.error as e:
        raise InvalidPatternError(keyword, str(e)) from e


def _pages(document: DocumentLike) -> Sequence[Page]:
    if isinstance(document, Document):
        return document.pages
    return document


def extract_text_from_page(document: DocumentLike, page_number: int) -> list[str]:
    """
    Return the non-empty, whitespace-trimmed lines of one page.

    Args:
        document: Document (or sequence of pages) from the extractor
        page_number: 0-based page index

    Raises:
        PageOutOfRangeError: if page_number is outside [0, len(pages) - 1]
    """
    pages = _pages(document)
    if not 0 <= page_number < len(pages):
        raise PageOutOfRangeError(page_number, len(pages))

    cleaned = []
    for line in pages[page_number].lines:
        line = line.strip()
        if line:
            cleaned.append(line)
    return cleaned


def extract_paragraphs_from_page(
    document: DocumentLike,
    page_number: int,
    is_continuation: LinePredicate = is_continuation_line,
) -> list[str]:
    """
    Merge a page's cleaned lines into paragraphs.

    A line that starts with a lowercase ASCII letter or a digit continues the
    current paragraph (joined with a single space); any other line starts a
    new one. This is a heuristic: extraction loses real paragraph breaks.

    A page with no text yields a single empty paragraph, so the result is
    never empty.
    """
    lines = extract_text_from_page(document, page_number)

    paragraphs = []
    current = lines[0] if lines else ""
    for line in lines[1:]:
        if is_continuation(line):
            current = f"{current} {line}"
        else:
            paragraphs.append(current)
            current = line
    paragraphs.append(current)
    return paragraphs


def extract_links_from_page(
    document: DocumentLike,
    page_number: int,
    pattern: re.Pattern = URL_PATTERN,
) -> set[str]:
    """Return the distinct http(s) URLs found in a page's cleaned text."""
    text = " ".join(extract_text_from_page(document, page_number))
    return set(pattern.findall(text))


def extract_all_text(document: DocumentLike) -> str:
    """Flatten every page into one string, separated by page-break markers."""
    pages = _pages(document)
    blocks = [
        "\n".join(extract_text_from_page(pages, i))
        for i in range(len(pages))
    ]
    return PAGE_BREAK.join(blocks)


def find_pages_with_keyword(
    document: DocumentLike,
    keyword: Union[str, re.Pattern],
) -> list[int]:
    """
    Return ascending indices of pages where any raw line matches keyword.

    The keyword is a case-insensitive regular expression, searched (not
    full-matched) against the unprocessed extractor lines. It is compiled
    before any page is read.

    Raises:
        InvalidPatternError: if keyword is not a valid regular expression
    """
    regex = compile_keyword(keyword)
    return [
        index
        for index, page in enumerate(_pages(document))
        if any(regex.search(line) for line in page.lines)
    ]

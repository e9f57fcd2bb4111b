import re
from typing import List, Optional, Tuple

from api.bible_data import chapter_in_range, match_book, verse_in_range
from api.errors import UserError
from api.models import BookEntry, Locus, ParsedReference, ReferenceRange, ends_before_start

INVALID_REFERENCE_MESSAGE = "An invalid Bible reference was provided."

BOOK_NOT_FOUND = "book_not_found"
TOO_MANY_DASHES = "too_many_dashes"
TOO_MANY_COLONS_START = "too_many_colons_start"
TOO_MANY_COLONS_END = "too_many_colons_end"
OUT_OF_RANGE = "out_of_range"
END_BEFORE_START = "end_before_start"

REJECTION_INFO = {
    BOOK_NOT_FOUND: "The provided book could not be found.",
    TOO_MANY_DASHES: "Expected only 1 dash in the reference.",
    TOO_MANY_COLONS_START: "Too many colons were found at the beginning of the reference.",
    TOO_MANY_COLONS_END: "Too many colons were found at the end of the reference.",
    OUT_OF_RANGE: "The provided reference is out of range.",
    END_BEFORE_START: "The beginning of the reference is larger than the end of the reference.",
}

_INT_PATTERN = re.compile(r"[0-9]+")

# (chapter, verse) before it becomes a Locus
Point = Tuple[int, Optional[int]]


def _reject(code: str) -> UserError:
    return UserError(INVALID_REFERENCE_MESSAGE, info=REJECTION_INFO[code], code=code)


def _to_int(part: str) -> int:
    # Non-numeric parts ("", "a") never name a real chapter or verse.
    if not _INT_PATTERN.fullmatch(part):
        raise _reject(OUT_OF_RANGE)
    return int(part)


def _end_point(start_chapter: int, start_has_verse: bool, end_parts: List[str]) -> Point:
    if len(end_parts) == 1:
        if start_has_verse:
            # "1:1-5" stays inside the starting chapter
            return start_chapter, _to_int(end_parts[0])
        return _to_int(end_parts[0]), None
    return _to_int(end_parts[0]), _to_int(end_parts[1])


def _split_passage(passage: str) -> Tuple[Point, Optional[Point]]:
    compact = re.sub(r"\s", "", passage or "")
    if not compact:
        return (1, None), None

    halves = compact.split("-")
    if len(halves) > 2:
        raise _reject(TOO_MANY_DASHES)

    start_parts = halves[0].split(":")
    end_parts: Optional[List[str]] = halves[1].split(":") if len(halves) == 2 else None

    if len(start_parts) > 2:
        raise _reject(TOO_MANY_COLONS_START)
    if end_parts is not None and len(end_parts) > 2:
        raise _reject(TOO_MANY_COLONS_END)

    start_chapter = _to_int(start_parts[0])
    start_verse = _to_int(start_parts[1]) if len(start_parts) == 2 else None
    start = (start_chapter, start_verse)

    if end_parts is None:
        return start, None
    return start, _end_point(start_chapter, start_verse is not None, end_parts)


def _points_in_range(book: BookEntry, start: Point, end: Optional[Point]) -> bool:
    for chapter, verse in (start, end) if end is not None else (start,):
        if not chapter_in_range(book, chapter):
            return False
        if verse is not None and not verse_in_range(book, chapter, verse):
            return False
    return True


def _points_out_of_order(start: Point, end: Optional[Point]) -> bool:
    return end is not None and ends_before_start(start[0], start[1], end[0], end[1])


def _build_range(start: Point, end: Optional[Point]) -> ReferenceRange:
    if end is None:
        return ReferenceRange(start=Locus(chapter=start[0], verse=start[1]))
    return ReferenceRange(
        start=Locus(chapter=start[0], verse=start[1]),
        end=Locus(chapter=end[0], verse=end[1]),
    )


def parse_passage(passage: str) -> ReferenceRange:
    """
    Turn the text after the book name into a range, without checking it
    against any book.

        ""         -> chapter 1
        "1"        -> chapter 1
        "1-2"      -> chapter 1 to chapter 2
        "1-2:3"    -> chapter 1 to 2:3
        "1:1"      -> 1:1
        "1:1-2"    -> 1:1 to 1:2
        "1:1-2:3"  -> 1:1 to 2:3

    Zero chapters or verses are out_of_range and a range running backwards
    is end_before_start, the same codes validate_reference uses.
    """
    start, end = _split_passage(passage)
    points = (start, end) if end is not None else (start,)
    if any(value is not None and value < 1 for point in points for value in point):
        raise _reject(OUT_OF_RANGE)
    if _points_out_of_order(start, end):
        raise _reject(END_BEFORE_START)
    return _build_range(start, end)


def validate_reference(text: str) -> ParsedReference:
    """
    Validate a reference such as "Genesis 1:1-2:3".

    Returns the parsed reference, or raises UserError whose `code` is one of
    book_not_found, too_many_dashes, too_many_colons_start,
    too_many_colons_end, out_of_range, end_before_start.
    """
    found = match_book(text)
    if found is None:
        raise _reject(BOOK_NOT_FOUND)
    book, matched_len = found

    start, end = _split_passage(text[matched_len:])

    if not _points_in_range(book, start, end):
        raise _reject(OUT_OF_RANGE)
    if _points_out_of_order(start, end):
        raise _reject(END_BEFORE_START)

    return ParsedReference(book=book, range=_build_range(start, end))


def _format_locus(locus: Locus) -> str:
    if locus.verse is None:
        return str(locus.chapter)
    return f"{locus.chapter}:{locus.verse}"


def format_reference(parsed: ParsedReference) -> str:
    text = f"{parsed.book.name} {_format_locus(parsed.range.start)}"
    if parsed.range.end is not None:
        text += f"-{_format_locus(parsed.range.end)}"
    return text

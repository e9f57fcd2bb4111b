import pytest
from pydantic import ValidationError

from api.bible_data import BOOKS, chapter_count, find_book
from api.errors import UserError
from api.models import Locus, ReferenceRange
from api.ref_parser import format_reference, parse_passage, validate_reference


def _code(text: str) -> str:
    with pytest.raises(UserError) as exc_info:
        validate_reference(text)
    return exc_info.value.code


def test_validate_lone_book_defaults_to_chapter_one():
    parsed = validate_reference("Jude")
    assert parsed.book.name == "Jude"
    assert parsed.range == ReferenceRange(start=Locus(chapter=1))


def test_validate_single_chapter():
    parsed = validate_reference("Genesis 1")
    assert parsed.book.name == "Genesis"
    assert parsed.range.start == Locus(chapter=1)
    assert parsed.range.end is None


def test_validate_single_verse():
    parsed = validate_reference("Genesis 1:1")
    assert parsed.range == ReferenceRange(start=Locus(chapter=1, verse=1))


def test_validate_verses_within_chapter():
    parsed = validate_reference("Genesis 1:1-2")
    assert parsed.range.start == Locus(chapter=1, verse=1)
    assert parsed.range.end == Locus(chapter=1, verse=2)


def test_validate_chapter_to_chapter():
    parsed = validate_reference("Genesis 1-2")
    assert parsed.range == ReferenceRange(start=Locus(chapter=1), end=Locus(chapter=2))


def test_validate_chapter_to_verse():
    parsed = validate_reference("Genesis 1-2:3")
    assert parsed.range.start == Locus(chapter=1)
    assert parsed.range.end == Locus(chapter=2, verse=3)


def test_validate_verse_to_verse_across_chapters():
    parsed = validate_reference("Genesis 1:5-2:6")
    assert parsed.range.start == Locus(chapter=1, verse=5)
    assert parsed.range.end == Locus(chapter=2, verse=6)


def test_validate_ignores_whitespace_in_passage():
    parsed = validate_reference("Genesis 1 : 1 - 2 : 3")
    assert parsed.range.start == Locus(chapter=1, verse=1)
    assert parsed.range.end == Locus(chapter=2, verse=3)


def test_validate_is_case_insensitive():
    assert validate_reference("genesis 3:15").book.name == "Genesis"
    assert validate_reference("ROMANS 8").book.name == "Romans"


def test_validate_abbreviation():
    parsed = validate_reference("Gen 1:1")
    assert parsed.book.name == "Genesis"
    assert parsed.range.start == Locus(chapter=1, verse=1)


def test_validate_numbered_book_abbreviation():
    parsed = validate_reference("1 Cor 13:4-7")
    assert parsed.book.name == "1 Corinthians"
    assert parsed.range.end == Locus(chapter=13, verse=7)


def test_validate_multi_word_book():
    parsed = validate_reference("Song of Solomon 2:1")
    assert parsed.book.name == "Song of Solomon"
    assert parsed.range.start == Locus(chapter=2, verse=1)


def test_validate_every_chapter_of_every_book():
    for book in BOOKS:
        for chapter in range(1, chapter_count(book) + 1):
            parsed = validate_reference(f"{book.name} {chapter}")
            assert parsed.book == book
            assert parsed.range == ReferenceRange(start=Locus(chapter=chapter))


def test_validate_last_verse_of_chapter():
    assert validate_reference("Psalms 119:176").range.start.verse == 176
    assert _code("Psalms 119:177") == "out_of_range"


def test_single_chapter_book_accepts_number_as_chapter_bound():
    parsed = validate_reference("Jude 5-12")
    assert parsed.range == ReferenceRange(start=Locus(chapter=5), end=Locus(chapter=12))
    assert _code("Jude 26") == "out_of_range"


def test_single_chapter_book_with_verse():
    parsed = validate_reference("Philemon 1:10")
    assert parsed.range.start == Locus(chapter=1, verse=10)
    assert _code("Philemon 2:1") == "out_of_range"


def test_rejects_unknown_book():
    assert find_book("Hezekiah") is None
    with pytest.raises(UserError) as exc_info:
        validate_reference("Hezekiah")
    error = exc_info.value
    assert error.code == "book_not_found"
    assert error.message == "An invalid Bible reference was provided."
    assert error.info == "The provided book could not be found."
    assert error.suggestion is None


def test_rejects_partial_word_book_match():
    assert _code("Johnathan 1") == "book_not_found"
    assert _code("Genesis1") == "book_not_found"


def test_rejects_chapter_out_of_range():
    assert _code("Genesis 1000") == "out_of_range"
    assert _code("Genesis 1-1000") == "out_of_range"
    assert _code("Genesis 0") == "out_of_range"


def test_rejects_verse_out_of_range():
    assert _code("Genesis 1:1000") == "out_of_range"
    assert _code("Genesis 1:1-1000") == "out_of_range"
    assert _code("Genesis 1:0") == "out_of_range"


def test_rejects_non_numeric_parts():
    assert _code("Genesis a") == "out_of_range"
    assert _code("Genesis 1:") == "out_of_range"
    assert _code("Genesis -3") == "out_of_range"


def test_rejects_end_before_start():
    assert _code("Genesis 2-1") == "end_before_start"
    assert _code("Genesis 1:2-1") == "end_before_start"
    assert _code("Genesis 2:1-1:5") == "end_before_start"


def test_does_not_compare_verse_against_bare_chapter():
    # 2:5-2 reads as 2:5 to 2:2, but "2-2:1" has no start verse to compare
    assert _code("Genesis 2:5-2") == "end_before_start"
    parsed = validate_reference("Genesis 2-2:1")
    assert parsed.range.end == Locus(chapter=2, verse=1)


def test_rejects_too_many_dashes():
    with pytest.raises(UserError) as exc_info:
        validate_reference("Genesis 1-2-3")
    assert exc_info.value.code == "too_many_dashes"
    assert exc_info.value.info == "Expected only 1 dash in the reference."


def test_rejects_too_many_colons():
    assert _code("Genesis 1:2:3-4") == "too_many_colons_start"
    assert _code("Genesis 1-2:3:4") == "too_many_colons_end"
    assert _code("Genesis 1:1-2:3:4") == "too_many_colons_end"


def test_syntax_checks_run_before_range_checks():
    assert _code("Genesis 1000-2:3:4") == "too_many_colons_end"
    assert _code("Genesis a-b-c") == "too_many_dashes"


def test_parse_passage_shapes():
    assert parse_passage("") == ReferenceRange(start=Locus(chapter=1))
    assert parse_passage("3:4-6") == ReferenceRange(
        start=Locus(chapter=3, verse=4), end=Locus(chapter=3, verse=6)
    )


def test_parse_passage_rejects_ranges_no_book_could_hold():
    for passage, code in [
        ("2-1", "end_before_start"),
        ("1:5-3", "end_before_start"),
        ("0", "out_of_range"),
        ("1:0", "out_of_range"),
        ("1-0:4", "out_of_range"),
    ]:
        with pytest.raises(UserError) as exc_info:
            parse_passage(passage)
        assert exc_info.value.code == code


def test_locus_requires_positive_numbers():
    for kwargs in ({"chapter": 0}, {"chapter": -1}, {"chapter": 1, "verse": 0}):
        with pytest.raises(ValidationError):
            Locus(**kwargs)


def test_reference_range_requires_end_not_before_start():
    with pytest.raises(ValidationError):
        ReferenceRange(start=Locus(chapter=2), end=Locus(chapter=1))
    with pytest.raises(ValidationError):
        ReferenceRange(start=Locus(chapter=3, verse=9), end=Locus(chapter=3, verse=2))
    with pytest.raises(ValidationError):
        ReferenceRange(
            start=Locus(chapter=5, verse=9),
            end={"chapter": -1, "verse": 0},
        )

    # verses are not compared when the end has none
    same_chapter = ReferenceRange(start=Locus(chapter=2, verse=5), end=Locus(chapter=2))
    assert same_chapter.end == Locus(chapter=2)
    assert ReferenceRange(start=Locus(chapter=4), end=Locus(chapter=4, verse=1)).end.verse == 1


def test_format_reference_round_trip():
    for text in ["Genesis", "Gen 1", "Genesis 1:1-2", "Genesis 1-2:3", "1 Cor 13:4-7", "Jude 5-12"]:
        parsed = validate_reference(text)
        again = validate_reference(format_reference(parsed))
        assert again.book == parsed.book
        assert again.range == parsed.range


def test_format_reference_text():
    assert format_reference(validate_reference("gen 1:1-2")) == "Genesis 1:1-1:2"
    assert format_reference(validate_reference("Jn 3")) == "John 3"


def test_parsed_reference_is_frozen():
    parsed = validate_reference("Genesis 1")
    with pytest.raises(ValidationError):
        parsed.range.start.chapter = 2

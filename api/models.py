from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator, model_validator


def ends_before_start(
    start_chapter: int,
    start_verse: Optional[int],
    end_chapter: int,
    end_verse: Optional[int],
) -> bool:
    if start_chapter > end_chapter:
        return True
    # Verses are only compared when both sides carry one.
    return (
        start_chapter == end_chapter
        and start_verse is not None
        and end_verse is not None
        and start_verse > end_verse
    )


class BookEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    abbr: Tuple[str, ...] = ()
    chapters: Tuple[int, ...] = Field(min_length=1)

    @field_validator("chapters")
    @classmethod
    def _positive_verse_counts(cls, value: Tuple[int, ...]) -> Tuple[int, ...]:
        if any(count < 1 for count in value):
            raise ValueError("every chapter needs at least one verse")
        return value


class Locus(BaseModel):
    model_config = ConfigDict(frozen=True)

    chapter: PositiveInt
    verse: Optional[PositiveInt] = None


class ReferenceRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: Locus
    end: Optional[Locus] = None

    @model_validator(mode="after")
    def _end_not_before_start(self) -> "ReferenceRange":
        if self.end is not None and ends_before_start(
            self.start.chapter, self.start.verse, self.end.chapter, self.end.verse
        ):
            raise ValueError("end of range is before its start")
        return self


class ParsedReference(BaseModel):
    model_config = ConfigDict(frozen=True)

    book: BookEntry
    range: ReferenceRange


class BookItem(BaseModel):
    name: str
    abbr: List[str]
    chapter_count: int


class BooksResponse(BaseModel):
    items: List[BookItem]


class RefResponse(BaseModel):
    reference: str
    book: str
    range: ReferenceRange


class SpeakerField(BaseModel):
    new: bool = False
    value: str = ""
    first_name: str = ""
    last_name: str = ""


class SeriesField(BaseModel):
    new: bool = False
    value: str = ""
    new_value: str = ""


class ReferenceField(BaseModel):
    book: str = ""
    passage: str = ""


class SermonFormData(BaseModel):
    speaker: SpeakerField
    title: str = ""
    series: SeriesField
    reference: ReferenceField = ReferenceField()
    date: str
    time: str
    sermon_file_name: str
    sermon_pic_name: str


class SermonValidateResponse(BaseModel):
    valid: bool

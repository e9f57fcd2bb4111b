import json
import os
import re
from datetime import datetime
from typing import List

from api import config
from api.errors import UserError
from api.models import ReferenceField, SeriesField, SermonFormData, SpeakerField
from api.ref_parser import validate_reference

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
TIMES_OF_DAY = ("Sunday Morning", "Sunday Evening", "Other")
MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

SERMON_FILE = "sermon file"
THUMBNAIL = "thumbnail"


def _load_names(path: str) -> List[str]:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return []
    return [str(name) for name in data]


def load_speakers() -> List[str]:
    return _load_names(config.SPEAKERS_PATH)


def load_series() -> List[str]:
    return _load_names(config.SERIES_PATH)


def validate_speaker(speaker: SpeakerField) -> None:
    if speaker.new:
        if not speaker.first_name or not speaker.last_name:
            raise UserError("A first name and last name are required for new speakers.")
        return

    if speaker.value not in load_speakers():
        raise UserError(f'No existing speaker was found with the name "{speaker.value}".')


def validate_title(title: str, time_of_day: str) -> None:
    if not title and time_of_day != "Sunday Evening":
        raise UserError("An empty title is only allowed for evening services.")


def validate_series(series: SeriesField) -> None:
    if series.new:
        if not series.new_value:
            raise UserError("A valid series name is required for new series.")
        return

    if series.value not in load_series():
        raise UserError(f'No existing series called "{series.value}" was found.')


def validate_reference_field(reference: ReferenceField) -> None:
    if not reference.book and not reference.passage:
        return

    if not reference.book or not reference.passage:
        raise UserError(
            "An incomplete Bible reference was provided.",
            suggestion="Please use a complete Bible reference or exclude it entirely.",
        )

    validate_reference(f"{reference.book} {reference.passage}")


def _is_leap_year(year: int) -> bool:
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def validate_date(date: str) -> None:
    if not DATE_PATTERN.fullmatch(date or ""):
        raise UserError(
            "An invalid date was provided.",
            info="The expected date format is 'YYYY-MM-DD'.",
        )

    year, month, day = (int(part) for part in date.split("-"))

    if year < 1900 or year > datetime.now().year:
        raise UserError(
            "An invalid year was provided.",
            info="Year must be no earlier than 1900 and no later than this year.",
        )

    if month < 1 or month > 12:
        raise UserError("An invalid month was provided.")

    month_days = MONTH_DAYS[month - 1]
    if month == 2 and _is_leap_year(year):
        month_days = 29

    if day < 1 or day > month_days:
        raise UserError(
            "An invalid day was provided for the given month and year.",
            suggestion="Remember to account for leap years.",
        )


def validate_time(time_of_day: str) -> None:
    if time_of_day not in TIMES_OF_DAY:
        raise UserError("An invalid time of day was provided.")


def validate_file(file_type: str, filename: str) -> None:
    extension = "mp3" if file_type == SERMON_FILE else "png"
    if not (filename or "").endswith(f".{extension}"):
        raise UserError(f"Only .{extension} files are allowed for {file_type}s.")

    directory = config.sermon_files_dir() if file_type == SERMON_FILE else config.thumbnails_dir()
    # Bare file names only, no directory parts.
    if os.path.basename(filename) != filename:
        raise UserError(
            f'Invalid {file_type} name "{filename}".',
            info=f"{file_type.capitalize()}s are only allowed to come from {directory}.",
        )

    try:
        os.stat(os.path.join(os.path.abspath(directory), filename))
    except FileNotFoundError:
        raise UserError(
            f'Could not find {file_type} with the name "{filename}".',
            info=f"{file_type.capitalize()}s are only allowed to come from {directory}.",
        )


def validate_sermon_form(form: SermonFormData) -> None:
    validate_speaker(form.speaker)
    validate_title(form.title, form.time)
    validate_series(form.series)
    validate_reference_field(form.reference)
    validate_date(form.date)
    validate_time(form.time)
    validate_file(SERMON_FILE, form.sermon_file_name)
    validate_file(THUMBNAIL, form.sermon_pic_name)

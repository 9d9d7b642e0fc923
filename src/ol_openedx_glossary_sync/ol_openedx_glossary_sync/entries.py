"""Value objects for glossary rows and import candidates."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GlossaryRecord:
    """A parsed CSV row, not yet validated or checked for duplicates."""

    term: str
    translation: str
    part_of_speech: str = ""
    comment: str = ""


@dataclass(frozen=True)
class CandidateEntry:
    """A glossary record bound to the local locale it is imported into."""

    locale: str
    term: str
    translation: str
    part_of_speech: str = ""
    comment: str = ""

    @classmethod
    def from_record(cls, record: GlossaryRecord, locale: str) -> "CandidateEntry":
        return cls(
            locale=locale,
            term=record.term,
            translation=record.translation,
            part_of_speech=record.part_of_speech,
            comment=record.comment,
        )

    def is_valid(self) -> bool:
        """Term and translation are both required."""
        return bool(self.term.strip()) and bool(self.translation.strip())

    def lookup_fields(self) -> dict[str, str]:
        """Fields that make two entries in one glossary equivalent."""
        return {
            "term": self.term,
            "translation": self.translation,
            "part_of_speech": self.part_of_speech,
            "comment": self.comment,
        }

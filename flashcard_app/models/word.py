"""Data models for dictionary lookups."""

from dataclasses import dataclass, field

# Abbreviations shown next to translations, e.g. "(n.) 蘋果"
_POS_ABBREVIATIONS = {
    "noun": "n.",
    "verb": "v.",
    "adjective": "adj.",
    "adverb": "adv.",
    "pronoun": "pron.",
    "preposition": "prep.",
    "conjunction": "conj.",
    "interjection": "interj.",
    "exclamation": "excl.",
}


@dataclass
class WordDefinition:
    """One part-of-speech sense of a word with its translation."""

    word: str
    part_of_speech: str = ""
    translation: str = ""
    english_definition: str = ""
    selected: bool = False

    @property
    def short_part_of_speech(self) -> str:
        return _POS_ABBREVIATIONS.get(self.part_of_speech.lower(), self.part_of_speech)

    @property
    def display_text(self) -> str:
        """Text used for the card back, e.g. '(n.) 蘋果'."""
        return f"({self.short_part_of_speech}) {self.translation}"


@dataclass
class WordLookupResult:
    """Result of looking up a single word."""

    word: str
    phonetic: str = ""
    definitions: list[WordDefinition] = field(default_factory=list)
    success: bool = False
    error_message: str = ""

    def to_dict(self) -> dict:
        return {
            "word": self.word,
            "definitions": [
                {"part_of_speech": d.part_of_speech, "translation": d.translation}
                for d in self.definitions
            ],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WordLookupResult":
        word = data.get("word", "")
        return cls(
            word=word,
            definitions=[
                WordDefinition(
                    word=word,
                    part_of_speech=d.get("part_of_speech", ""),
                    translation=d.get("translation", ""),
                )
                for d in data.get("definitions", [])
            ],
            success=True,
        )

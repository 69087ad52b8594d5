"""Topic taxonomy: topic name -> ordered keyword list, loaded once at startup."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from standards_compare.core.errors import TaxonomyConfigurationError

DEFAULT_TAXONOMY_PATH = Path(__file__).resolve().parent.parent / "data" / "taxonomy.json"


class TaxonomyEntry(BaseModel):
    """One topic and its keywords in declaration order."""

    model_config = ConfigDict(frozen=True)

    topic: str
    keywords: Tuple[str, ...]

    @field_validator("topic")
    @classmethod
    def _topic_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("topic name must not be blank")
        return value

    @field_validator("keywords")
    @classmethod
    def _keywords_valid(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if not value:
            raise ValueError("keyword list must not be empty")
        for keyword in value:
            if not keyword.strip():
                raise ValueError("keywords must not be blank")
            if keyword != keyword.lower():
                raise ValueError(f"keyword '{keyword}' must be lowercase")
        return value


class Taxonomy:
    """
    Immutable, insertion-ordered mapping of topic -> keywords.

    Iteration follows the order topics were declared, which is what keeps
    comparison output deterministic.
    """

    def __init__(self, entries: List[TaxonomyEntry]):
        if not entries:
            raise TaxonomyConfigurationError("taxonomy declares no topics")
        index = {}
        for entry in entries:
            if entry.topic in index:
                raise TaxonomyConfigurationError("duplicate topic", topic=entry.topic)
            index[entry.topic] = entry
        self._entries = index

    @classmethod
    def from_pairs(cls, pairs: List[Tuple[str, List[str]]]) -> "Taxonomy":
        entries = []
        for topic, keywords in pairs:
            if not isinstance(keywords, (list, tuple)):
                raise TaxonomyConfigurationError("keywords must be a list", topic=str(topic))
            try:
                entries.append(TaxonomyEntry(topic=topic, keywords=tuple(keywords)))
            except ValidationError as exc:
                message = "; ".join(err["msg"] for err in exc.errors())
                raise TaxonomyConfigurationError(message, topic=str(topic)) from exc
        return cls(entries)

    @classmethod
    def from_dict(cls, mapping: dict) -> "Taxonomy":
        return cls.from_pairs(list(mapping.items()))

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "Taxonomy":
        """
        Load a taxonomy JSON file: an object of topic -> list of keywords.

        Duplicate keys are rejected instead of silently overwritten.
        """
        path = Path(path) if path else DEFAULT_TAXONOMY_PATH
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise TaxonomyConfigurationError(f"cannot read {path}: {exc}") from exc
        try:
            pairs = json.loads(raw, object_pairs_hook=list)
        except json.JSONDecodeError as exc:
            raise TaxonomyConfigurationError(f"{path} is not valid JSON: {exc}") from exc
        if not isinstance(pairs, list) or not all(isinstance(pair, tuple) for pair in pairs):
            raise TaxonomyConfigurationError(f"{path} must contain a JSON object")
        return cls.from_pairs(pairs)

    def keywords_for(self, topic: str) -> Tuple[str, ...]:
        return self._entries[topic].keywords

    def first_keyword(self, topic: str) -> str:
        return self._entries[topic].keywords[0]

    @property
    def topics(self) -> List[str]:
        return list(self._entries)

    def __contains__(self, topic: object) -> bool:
        return topic in self._entries

    def __iter__(self) -> Iterator[TaxonomyEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"<Taxonomy topics={len(self._entries)}>"

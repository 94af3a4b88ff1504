"""Flatten a game specification XML document into a tag-path dictionary."""

from __future__ import annotations

from pathlib import Path
from xml.parsers import expat

_TRAILING_SPACE = " \n\t"


class XmlSpecError(Exception):
    """Raised when a specification document cannot be read or parsed."""


class _SpecCollector:
    def __init__(self) -> None:
        self.tag_names: list[str] = []
        self.data: dict[str, str] = {}

    def _path(self) -> str:
        inner = self.tag_names[1:-1]
        return "".join(name + "/" for name in inner) + self.tag_names[-1]

    def _insert(self, key: str, value: str) -> None:
        self.data.setdefault(key, value)

    def start(self, name: str, attrs: dict[str, str]) -> None:
        self.tag_names.append(name)
        for attr, value in attrs.items():
            self._insert(f"{self._path()}/{attr}", value)

    def end(self, name: str) -> None:
        if name != self.tag_names[-1]:
            raise XmlSpecError(
                f"Tags {name} and {self.tag_names[-1]} don't match"
            )
        self.tag_names.pop()

    def chars(self, text: str) -> None:
        text = text.rstrip(_TRAILING_SPACE)
        if text:
            self._insert(self._path(), text)


def _parse(text: str, source: str) -> dict[str, str]:
    collector = _SpecCollector()
    parser = expat.ParserCreate()
    parser.StartElementHandler = collector.start
    parser.EndElementHandler = collector.end
    parser.CharacterDataHandler = collector.chars
    try:
        # Lines are fed without their newline characters.
        for line in text.split("\n"):
            parser.Parse(line, False)
        parser.Parse("", True)
    except expat.ExpatError as exc:
        raise XmlSpecError(
            f"Couldn't parse file: {source} "
            f"(line {exc.lineno}: {expat.ErrorString(exc.code)})"
        ) from exc
    return dict(sorted(collector.data.items()))


def parse_xml_string(text: str) -> dict[str, str]:
    """Parse specification text into a mapping of tag paths to values."""
    return _parse(text, "<string>")


def parse_xml_file(path: str | Path) -> dict[str, str]:
    """Parse a specification file into a mapping of tag paths to values."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise XmlSpecError(f"Cannot open xml file: {path}") from exc
    return _parse(text, str(path))
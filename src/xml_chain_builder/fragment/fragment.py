"""Fragment state, attribute options and fragment constructors.

A ``Fragment`` is an immutable buffer of XML markup. Builder operations never
modify a fragment they receive; they return a new one whose text is the new
markup followed by the previous text.
"""

from dataclasses import dataclass
from typing import Sequence

from xml_chain_builder.shared import BuilderError, Err, Ok, Outcome

DECLARATION_TEMPLATE = '<?xml version="{version}" encoding="{encoding}"?>\n'


@dataclass(frozen=True)
class Fragment:
    """Accumulated XML markup, not yet guaranteed to be a complete document."""

    text: str = ""

    @property
    def is_empty(self) -> bool:
        """Check if no markup has been accumulated."""
        return not self.text

    def prepend(self, markup: str) -> "Fragment":
        """Return a new fragment with ``markup`` placed before the current text."""
        return Fragment(markup + self.text)


@dataclass(frozen=True)
class Option:
    """A single XML attribute rendered as ``label="value"``."""

    label: str
    value: str

    def render(self) -> str:
        return f' {self.label}="{self.value}"'


def render_options(options: Sequence[Option]) -> str:
    """Render attributes in list order, each preceded by a single space."""
    return "".join(option.render() for option in options)


def render_declaration(version: str, encoding: str) -> str:
    """Render the ``<?xml ...?>`` declaration line."""
    return DECLARATION_TEMPLATE.format(version=version, encoding=encoding)


def inner_text(inner: Outcome[Fragment]) -> str:
    """Get the markup held by a nested outcome; failed outcomes count as empty."""
    if isinstance(inner, Err):
        return ""
    return inner.value.text


def new() -> Outcome[Fragment]:
    """Start an empty fragment.

    Returns:
        Ok wrapping a fragment with no text
    """
    return Ok(Fragment())


def new_document() -> Outcome[Fragment]:
    """Start a fragment seeded with the UTF-8, version 1.0 declaration.

    Examples:
        >>> new_document().unwrap().text
        '<?xml version="1.0" encoding="UTF-8"?>\\n'
    """
    return Ok(Fragment(render_declaration("1.0", "UTF-8")))


def new_advanced_document(version: str, encoding: str) -> Outcome[Fragment]:
    """Start a fragment seeded with a declaration for ``version`` and ``encoding``.

    Args:
        version: XML version written into the declaration
        encoding: Encoding name written into the declaration

    Returns:
        Ok wrapping the seeded fragment, Err(VERSION_EMPTY) when ``version``
        is empty, otherwise Err(ENCODING_EMPTY) when ``encoding`` is empty
    """
    if not version:
        return Err(BuilderError.VERSION_EMPTY)
    if not encoding:
        return Err(BuilderError.ENCODING_EMPTY)
    return Ok(Fragment(render_declaration(version, encoding)))

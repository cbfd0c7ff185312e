"""
Text buffers carrying per-character attributes.

Defines the minimal protocol the style converter needs from a text buffer,
and ``AttributedText``, an in-memory implementation of it.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol, Tuple, runtime_checkable

from ..exceptions import InvalidArgumentError
from ..models.attribute_set import AttributeSet, TextRange

logger = logging.getLogger(__name__)


@runtime_checkable
class TextBuffer(Protocol):
    """Anything that can read and write text attributes over a range."""

    def __len__(self) -> int:
        ...

    def attributes_at(self, index: int) -> AttributeSet:
        """Return the attributes of the character at ``index``."""
        ...

    def set_attributes(self, text_range: TextRange, attributes: AttributeSet) -> None:
        """Replace the attributes over ``text_range`` with ``attributes``."""
        ...

    def add_attributes(self, text_range: TextRange, attributes: AttributeSet) -> None:
        """Write the present fields of ``attributes`` over ``text_range``."""
        ...


class AttributedText:
    """
    String with one attribute set per character.

    Adjacent characters with equal attributes are reported together by
    ``runs()``.
    """

    def __init__(self, text: str = "", attributes: Optional[AttributeSet] = None):
        self.text = text
        self._attributes: List[AttributeSet] = [attributes or AttributeSet()] * len(text)

    def __len__(self) -> int:
        return len(self.text)

    def __repr__(self) -> str:
        return f"AttributedText({self.text!r}, runs={len(self.runs())})"

    def _check_range(self, text_range: TextRange) -> None:
        if text_range.end > len(self.text):
            raise InvalidArgumentError(
                "Range outside text",
                f"{text_range.location}+{text_range.length} > {len(self.text)}",
            )

    def attributes_at(self, index: int) -> AttributeSet:
        if not 0 <= index < len(self.text):
            raise InvalidArgumentError("Index outside text", str(index))
        return self._attributes[index]

    def set_attributes(self, text_range: TextRange, attributes: AttributeSet) -> None:
        self._check_range(text_range)
        for index in range(text_range.location, text_range.end):
            self._attributes[index] = attributes
        logger.debug(f"Attributes set over {text_range}: {attributes.present_fields()}")

    def add_attributes(self, text_range: TextRange, attributes: AttributeSet) -> None:
        self._check_range(text_range)
        for index in range(text_range.location, text_range.end):
            self._attributes[index] = attributes.merged_over(self._attributes[index])
        logger.debug(f"Attributes added over {text_range}: {attributes.present_fields()}")

    def append(self, text: str, attributes: Optional[AttributeSet] = None) -> None:
        """
        Append text.

        Args:
            text: Text to append
            attributes: Attributes of the new text; the attributes of the last
                character are continued when omitted
        """
        if attributes is None:
            attributes = self._attributes[-1] if self._attributes else AttributeSet()
        self.text += text
        self._attributes.extend([attributes] * len(text))

    def substring(self, text_range: TextRange) -> str:
        self._check_range(text_range)
        return self.text[text_range.location:text_range.end]

    def runs(self) -> List[Tuple[TextRange, AttributeSet]]:
        """
        Get runs of uniformly formatted text.

        Returns:
            List of (range, attributes) pairs covering the whole text
        """
        runs: List[Tuple[TextRange, AttributeSet]] = []
        start = 0
        for index in range(1, len(self._attributes) + 1):
            if index == len(self._attributes) or self._attributes[index] != self._attributes[start]:
                runs.append((TextRange(start, index - start), self._attributes[start]))
                start = index
        return runs

#!/usr/bin/env python3
"""
Example of keeping a text style and its text in sync.

Applies a style to a run of text, edits the text directly and adopts the
edit back into the style, printing the undo label of each change.
"""

from drawstyle import (
    AttributeSet,
    AttributedText,
    FontDescription,
    FontTrait,
    TextAlignment,
    TextAttribute,
    TextColor,
    TextRange,
    adopt_from_text,
    apply_to_text,
    text_style_with_font,
)


def main():
    """Run the example."""

    # 1. Create a style named after its font
    style = text_style_with_font(FontDescription("Helvetica", frozenset({FontTrait.BOLD}), 18))
    print(f"Style: {style.name}")

    # 2. Change one attribute through the record
    action = style.change_text_attribute(TextAttribute.ALIGNMENT, TextAlignment.CENTER)
    print(f"   Undo label: {action}")

    # 3. Apply the style to some text
    text = AttributedText("Quarterly report")
    apply_to_text(style.text, text)
    print(f"   Runs after apply: {len(text.runs())}")

    # 4. Edit the text directly, then adopt the edit
    text.add_attributes(TextRange.whole(len(text)), AttributeSet(color=TextColor.from_value("#336699")))
    adopt_from_text(style.text, text)
    print(f"   Colour adopted: {style.text.get_text_color().to_hex()}")
    print(f"   Undo label: {style.text.action_name()}")


if __name__ == "__main__":
    main()

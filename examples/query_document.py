#!/usr/bin/env python3
"""
Document query example
Parses a small page and exercises lookup, text extraction and attribute editing
"""

import sys

from htmlelements import (
    LogManager,
    add_attribute,
    get_attribute,
    get_element_by_id,
    get_elements_by_class_name,
    get_elements_by_tag_name,
    inner_text,
    parse_html,
    remove_attribute
)

PAGE = """
<html>
<body>
<nav id="menu" class="navbar dark">
<a href="/" class="link active">Home</a>
<a href="/docs" class="link" data-track="1">Docs</a>
</nav>
<div id="content">
<p class="para">First paragraph</p>
<p class="para note">Second paragraph</p>
</div>
</body>
</html>
"""


def main():
    """Query example"""
    LogManager(log_level="INFO")
    print("🌳 Document Query Example")
    print("=" * 50)

    document = parse_html(PAGE)

    content = get_element_by_id(document, 'content')
    if content is None:
        print("❌ content node not found")
        sys.exit(1)

    paragraphs = get_elements_by_tag_name(content, 'p')
    print(f"Paragraphs in #content: {len(paragraphs)}")
    for paragraph in paragraphs:
        print(f"  - {inner_text(paragraph)!r} (class={get_attribute(paragraph, 'class')!r})")

    notes = get_elements_by_class_name(document, 'note')
    print(f"Elements with class 'note': {len(notes)}")

    links = get_elements_by_tag_name(document, 'a')
    for link in links:
        add_attribute(link, 'class', 'external')
        remove_attribute(link, 'data-track')
        print(f"  - {get_attribute(link, 'href')} class={get_attribute(link, 'class')!r}")

    print("\n✅ Query example completed!")


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Quick Start Guide for the XML Chain Builder.

This example walks through the three API levels: pure operations, step/pipe
composition and the configured fluent builder.
"""

import logging
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from xml_chain_builder import (
    BuilderConfig,
    Option,
    XMLBuilder,
    block_tag,
    end_xml,
    new,
    option_content_tag,
    option_tag,
    pipe,
    step,
    tag,
)


def pure_operations_example():
    """Build a small book record by nesting function calls."""

    print("🚀 LEVEL 1 - Pure operations")
    print("=" * 40)

    # Siblings come out in reverse call order: add the last child first
    details = option_content_tag(new(), "price", "19.99", [Option("currency", "USD")])
    details = tag(details, "author", "John Doe")
    details = tag(details, "title", "My Book")
    book = block_tag(new(), "book", details)

    result = end_xml(book)
    if result.is_ok():
        print(result.unwrap())
    else:
        print(f"❌ Failed: {result.unwrap_err().description}")


def pipeline_example():
    """Thread an outcome through steps and show error short-circuiting."""

    print("\n🔗 LEVEL 2 - step() and pipe()")
    print("=" * 40)

    links = pipe(
        new(),
        step(option_tag, "link", [Option("href", "https://example.com/b")]),
        step(option_tag, "link", [Option("href", "https://example.com/a")]),
    )
    print(end_xml(pipe(new(), step(block_tag, "links", links))).unwrap())

    broken = pipe(new(), step(tag, "", "missing label"), step(tag, "ok", "1"))
    print(f"⚠️  First failure wins: {end_xml(broken).unwrap_err().name}")


def fluent_builder_example():
    """Use XMLBuilder with a custom declaration and step logging."""

    print("\n🧱 LEVEL 3 - XMLBuilder")
    print("=" * 40)

    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(message)s")
    config = BuilderConfig.verbose(correlation_id="quick-start").override(
        declaration__encoding="ISO-8859-1"
    )

    owner = XMLBuilder.fragment(config).tag("email", "e@x.com")
    document = (
        XMLBuilder.document(config)
        .option_block_tag("owner", owner, [Option("id", "1")])
        .comment("generated by the quick start guide")
    )

    result = document.end()
    print(result.unwrap_or("❌ nothing built"))


def main():
    """Main function."""
    pure_operations_example()
    pipeline_example()
    fluent_builder_example()


if __name__ == "__main__":
    main()

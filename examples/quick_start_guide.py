#!/usr/bin/env python3
"""
Quick Start Guide for the XML Determiner.

Shows the core predicate, the result-returning API and file validation.
"""

import sys
import tempfile
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from xml_determiner import XMLDeterminer, ValidatorConfig, determine_xml, validate_string

SAMPLES = [
    "<Design><Code>hello world</Code></Design>",
    "<Design><Code>hello world</Code></Design><People>",
    "<message>salary &lt; 1000</message>",
    "<message>salary < 1000</message>",
    '   <?xml version="1.0"?><a></a>',
]


def quick_start_example():
    """Quick start example showing basic usage."""

    print("QUICK START - XML Determiner")
    print("=" * 40)

    print("\nStep 1: Core predicate")
    print("-" * 30)
    for sample in SAMPLES:
        print(f"{'Valid' if determine_xml(sample) else 'Invalid':8} {sample}")

    print("\nStep 2: Results with metrics")
    print("-" * 30)
    result = validate_string("  <note><to>Tove</to></note>  ")
    print(f"Verdict: {result.verdict}")
    print(f"Characters: {result.metrics.characters_processed}")
    print(f"Time: {result.metrics.processing_time_ms:.3f}ms")

    print("\nStep 3: Files")
    print("-" * 30)
    determiner = XMLDeterminer(ValidatorConfig.strict())
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "note.xml"
        path.write_text("<note><!-- draft --><to>Tove</to></note>", encoding="utf-8")
        for result in determiner.validate_many([path, Path(tmp) / "missing.xml"]):
            print(f"{result.verdict}: {result.source} {result.error or ''}")


if __name__ == "__main__":
    quick_start_example()

"""Swap formatting strategies at runtime on a single TextProcessor."""

from textformatter import (
    TextProcessor,
    UpperCaseFormatter,
    LowerCaseFormatter,
    TitleCaseFormatter,
)

SENTENCE = "tHiS iS a TeSt"


def main():
    processor = TextProcessor()

    print("=" * 40)
    print("STRATEGY PATTERN: TEXT FORMATTER")
    print("=" * 40)
    print(f"\nInput: {SENTENCE!r}")
    print(f"  (no formatter) -> {processor.format(SENTENCE)!r}")

    # Same context, different behavior each time
    for formatter in (UpperCaseFormatter(), LowerCaseFormatter(), TitleCaseFormatter()):
        processor.set_formatter(formatter)
        print(f"  {formatter.name:<14} -> {processor.format(SENTENCE)!r}")

    processor.set_formatter(None)
    print(f"  (unbound again) -> {processor.format(SENTENCE)!r}")


if __name__ == "__main__":
    main()

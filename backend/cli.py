"""Score a block of text from the command line."""

import sys

from services.ai_detector import detect_ai
from services.errors import DetectorError
from utils.config import get_settings


def main(argv=None) -> None:
    args = sys.argv[1:] if argv is None else argv
    if args:
        text = " ".join(args)
    elif not sys.stdin.isatty():
        text = sys.stdin.read()
    else:
        print("Usage:")
        print('  text-origin-score "text to score"')
        print("  cat essay.txt | text-origin-score")
        raise SystemExit(1)

    try:
        result = detect_ai(text, get_settings())
    except DetectorError as e:
        print(f"Error: {e}")
        raise SystemExit(1)

    print(f"\nAI PROBABILITY: {result.ai_probability}%")
    print(f"CONFIDENCE: {result.confidence}")

    print("\nREASONING:")
    for reason in result.reasoning:
        print(f"- {reason}")

    print("\nMETRICS:")
    for name, value in result.metrics.to_dict().items():
        if isinstance(value, float):
            print(f"  {name}: {value:.3f}")
        else:
            print(f"  {name}: {value}")


if __name__ == "__main__":
    main()

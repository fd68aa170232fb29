#!/usr/bin/env python3
"""Demo of fixation-point reading on a built-in sample text."""

from fixread import CodepointText
from fixread.reader import Reader

SAMPLE = """Bionic reading guides the eye through a text by making the first
letters of every word bold. The brain completes the rest of the word, so
the eye can jump from fixation to fixation.

Numbers such as 1984 or 42nd are shown fully bold.

Press / to search, n and p to move between matches, a and q to turn pages.
"""


def main():
    print("Fixation Demo")
    print("=" * 50)
    print()
    print("The sample text is repeated so that it spans several pages.")
    print("Resize the terminal to see it repaginate in place.")
    print()
    print("Press Enter to start the reader...")
    input()

    reader = Reader(text=CodepointText(SAMPLE * 20))
    reader.run()

    print("\nReader closed.")

if __name__ == "__main__":
    main()

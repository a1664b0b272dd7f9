"""Package entry point for ``python -m skim``.

WHY: Users run the reader as ``python -m skim notes.md`` or pipe text in
with ``cat notes.md | python -m skim``.

HOW: Delegates straight to the CLI's main() function.
"""

from skim.cli import main

if __name__ == "__main__":
    main()

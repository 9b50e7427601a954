"""Package entry point for ``python -m speedread``.

WHY: Users run the reader as ``python -m speedread book.txt`` or pipe
text into ``python -m speedread``. Python's ``-m`` flag looks for
``__main__.py`` inside the package and executes it.

HOW: Delegates straight to the CLI's main() function.
"""

from speedread.cli import main

if __name__ == "__main__":
    main()

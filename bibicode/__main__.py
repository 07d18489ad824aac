"""Package entry point for ``python -m bibicode``.

WHY: Users run the converter as ``python -m bibicode -t hex 2000`` when
the console script is not on PATH. Python's ``-m`` flag looks for
``__main__.py`` inside the package and executes it.

HOW: Delegates to the CLI's main() function.
"""

from bibicode.cli import main

if __name__ == "__main__":
    main()

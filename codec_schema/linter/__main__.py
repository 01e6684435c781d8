"""Module entrypoint for `python -m codec_schema.linter`.

Delegates to the CLI implementation.
"""

from .run_lint import main


if __name__ == "__main__":
    main()

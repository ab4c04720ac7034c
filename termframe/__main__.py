"""Module entrypoint for ``python -m termframe``.

All argument parsing happens in ``termframe.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()

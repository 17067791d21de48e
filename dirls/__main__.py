"""Module entrypoint for ``python -m dirls``.

All argument parsing and listing happen in ``dirls.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()

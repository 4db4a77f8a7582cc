"""Allow ``python -m webstarter``."""

from .cli import main

main()

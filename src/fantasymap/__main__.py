"""Allow running as ``python -m fantasymap``."""

from .cli import main

main()

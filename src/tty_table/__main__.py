"""Allow running as ``python -m tty_table``."""

from tty_table.cli import main

main()

# SPDX-License-Identifier: MIT

from boojo.initialize import initialize
from boojo.terminal.app import run


def main() -> None:
    initialize()
    run()


if __name__ == "__main__":
    main()

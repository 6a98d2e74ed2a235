# SPDX-License-Identifier: MIT

from yeargrid.cleanup import register_cleanup
from yeargrid.terminal.app import run


def main() -> None:
    register_cleanup()
    run()


if __name__ == "__main__":
    main()

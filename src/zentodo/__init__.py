# SPDX-License-Identifier: MIT

from zentodo.cleanup import register_cleanup
from zentodo.initialize import initialize, initialize_logging
from zentodo.terminal.app import run


def main() -> None:
    initialize()
    initialize_logging()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()

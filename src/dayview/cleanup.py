# SPDX-License-Identifier: MIT

import atexit

from dayview.repository.configuration import CONFIGURATION_REPO


def flush() -> None:
    CONFIGURATION_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush)

# SPDX-License-Identifier: MIT

from typing import TypedDict


class Stats(TypedDict):
    total: int
    completed: int
    active: int
    percent: int

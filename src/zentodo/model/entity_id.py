# SPDX-License-Identifier: MIT

import uuid
from typing import TypeAlias

TaskId: TypeAlias = int | str
Identity: TypeAlias = str


def generate_document_id() -> str:
    return uuid.uuid4().hex

# SPDX-License-Identifier: MIT

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, Optional

from dayview.model.interval import TimeInterval


@dataclass(frozen=True)
class Event(TimeInterval):
    """An appointment for one displayed day.

    `id` only ties output back to input; events sharing an id are still laid
    out independently. `payload` is carried through untouched.
    """

    id: Optional[Hashable] = None
    payload: Any = None

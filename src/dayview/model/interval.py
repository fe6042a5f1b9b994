# SPDX-License-Identifier: MIT

from dataclasses import dataclass
from typing import Optional

import pendulum


@dataclass(frozen=True)
class TimeInterval:
    start: pendulum.DateTime
    end: Optional[pendulum.DateTime]

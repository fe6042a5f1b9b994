# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.padding import Padding
from rich.text import Text

from dayview.view.state import get_show_header


def header(source_name: str, sub_header: Optional[str] = None) -> None:
    """Print the dayview banner, the view title and the event source.

    Args:
        source_name: Name of the file the events were read from
        sub_header: View title such as "October 2023 - day"
    """
    if not get_show_header():
        return

    banner = Text("dayview", style="dark_orange")
    if sub_header is not None:
        banner.append("  ")
        banner.append(sub_header, style="sandy_brown")

    console = Console()
    console.print(Padding(banner, (1, 0, 0, 1)))
    console.print(Padding(Text(source_name, style="plum1"), (0, 1)))

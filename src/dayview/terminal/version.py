# SPDX-License-Identifier: MIT

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as package_version

from rich.console import Console


def version() -> None:
    """Show the installed version."""
    try:
        installed = package_version("dayview")
    except PackageNotFoundError:
        installed = "unknown"
    Console().print(f"dayview {installed}")

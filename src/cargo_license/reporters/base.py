"""Base interface for output reporters.

Reporters render the filtered dependency records into one of the output
formats and write the result to the console.
"""

from abc import ABC, abstractmethod

from rich.console import Console, RenderableType

from cargo_license.models import DependencyDetails


class BaseReporter(ABC):
    """Abstract base class for output reporters.

    Attributes:
        display_authors: Whether to include package authors in the output.
    """

    def __init__(self, display_authors: bool = False) -> None:
        self.display_authors = display_authors

    @abstractmethod
    def render(self, dependencies: list[DependencyDetails]) -> RenderableType:
        """Render dependency records.

        Args:
            dependencies: Filtered dependency records.

        Returns:
            Rendered output, a styled rich renderable for the human-readable formats.
        """
        ...

    def write(self, dependencies: list[DependencyDetails], console: Console) -> None:
        """Render and print the output to a rich console.

        Styling is dropped by the console when colour is disabled. Lines are
        never wrapped to the terminal width.
        """
        rendered = self.render(dependencies)
        if rendered:
            console.print(rendered, soft_wrap=True)

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Return the output format name, e.g. "json"."""
        ...


class PlainReporter(BaseReporter):
    """Reporter for machine-readable formats that must not be styled."""

    @abstractmethod
    def render(self, dependencies: list[DependencyDetails]) -> str:
        ...

    def write(self, dependencies: list[DependencyDetails], console: Console) -> None:
        """Write the output verbatim, bypassing rich rendering."""
        console.file.write(self.render(dependencies))
        console.file.flush()

"""Reporter listing packages bundled by license.

This is the default output: one line per license with the number of
packages using it and their names, for example::

    Apache-2.0 OR MIT (3): anyhow, itoa, serde
    MIT (1): demo
"""

from rich.text import Text

from cargo_license.grouping import group_by_license
from cargo_license.models import DependencyDetails
from cargo_license.reporters.base import BaseReporter

LICENSE_STYLE = "bold green"
BY_STYLE = "green"


class LicenseBundleReporter(BaseReporter):
    """Reporter that prints one entry per license.

    Multiple versions of a package with the same license count once. With
    authors enabled, each license entry spans three lines: the license and
    count, the package names, and the distinct authors.
    """

    def render(self, dependencies: list[DependencyDetails]) -> Text:
        lines = []
        for group in group_by_license(dependencies):
            names = ", ".join(group.names)
            if self.display_authors:
                lines.append(
                    Text.assemble(
                        (group.license, LICENSE_STYLE),
                        f" ({group.count})\n{names}\n",
                        ("by", BY_STYLE),
                        f" {', '.join(group.authors)}",
                    )
                )
            else:
                lines.append(
                    Text.assemble(
                        (group.license, LICENSE_STYLE),
                        f" ({group.count}): {names}",
                    )
                )
        return Text("\n").join(lines)

    @property
    def format_name(self) -> str:
        return "bundle"

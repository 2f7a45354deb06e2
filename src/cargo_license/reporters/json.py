"""JSON reporter.

Emits a pretty-printed array with one object per dependency record. Keys
always appear in the same order and absent values are ``null``.
"""

import json

from cargo_license.models import DependencyDetails
from cargo_license.reporters.base import PlainReporter


class JsonReporter(PlainReporter):
    """Reporter that serializes every record, authors included."""

    def render(self, dependencies: list[DependencyDetails]) -> str:
        records = [dependency.to_dict() for dependency in dependencies]
        return json.dumps(records, indent=2, ensure_ascii=False) + "\n"

    @property
    def format_name(self) -> str:
        return "json"

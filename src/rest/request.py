"""Transport-independent description of a single REST call."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Literal
from urllib.parse import quote

from resources.fields import FieldValue
from rest.errors import ArgumentValidationError

Method = Literal["GET", "POST", "DELETE"]

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


@dataclass(frozen=True)
class RequestDescription:
    method: Method
    resource: str
    url_segments: tuple[tuple[str, str], ...] = ()
    params: tuple[tuple[str, str], ...] = ()
    root_element: str | None = None
    # Fixed suffix such as ".txt"; replaces the format suffix.
    extension: str | None = None

    def param_dict(self) -> dict[str, str]:
        return dict(self.params)

    def resolve_path(self, account_sid: str, response_format: str = "xml") -> str:
        values = {"AccountSid": account_sid, **dict(self.url_segments)}

        def _substitute(match: re.Match[str]) -> str:
            name = match.group(1)
            value = values.get(name)
            if not value:
                raise ArgumentValidationError(name)
            return quote(value, safe="")

        path = _PLACEHOLDER.sub(_substitute, self.resource)
        if self.extension:
            return path + self.extension
        if response_format == "json":
            return path + ".json"
        return path


@dataclass
class RequestBuilder:
    method: Method = "GET"
    resource: str = ""
    root_element: str | None = None
    extension: str | None = None
    _segments: list[tuple[str, str]] = field(default_factory=list)
    _params: list[tuple[str, str]] = field(default_factory=list)

    def add_url_segment(self, name: str, value: str) -> RequestBuilder:
        self._segments.append((name, value))
        return self

    def add_param(self, name: str, value: Any) -> RequestBuilder:
        if isinstance(value, bool):
            value = "true" if value else "false"
        self._params.append((name, str(value)))
        return self

    def add_field(self, name: str, value: FieldValue) -> RequestBuilder:
        """Attach an option unless it is unset; cleared options go out empty."""

        if not value.is_unset:
            self._params.append((name, value.to_param()))
        return self

    def build(self) -> RequestDescription:
        return RequestDescription(
            method=self.method,
            resource=self.resource,
            url_segments=tuple(self._segments),
            params=tuple(self._params),
            root_element=self.root_element,
            extension=self.extension,
        )

"""Decoding of Twilio XML and JSON bodies into plain dicts and records."""

from __future__ import annotations

import json
import logging
import re
import xml.etree.ElementTree as ET
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from rest.errors import DeserializationError

LOGGER = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def to_snake(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def _is_list_element(element: ET.Element) -> bool:
    if "page" in element.attrib:
        return True
    children = list(element)
    if not children or not element.tag.endswith("s"):
        return False
    item_tag = element.tag[:-1]
    return all(child.tag == item_tag for child in children)


def _element_to_value(element: ET.Element) -> Any:
    children = list(element)
    if not children and not element.attrib:
        text = (element.text or "").strip()
        return text or None

    if _is_list_element(element):
        data: dict[str, Any] = {key: (value or None) for key, value in element.attrib.items()}
        data[to_snake(element.tag)] = [_element_to_value(child) for child in children]
        return data

    data = {key: (value or None) for key, value in element.attrib.items()}
    for child in children:
        key = to_snake(child.tag)
        value = _element_to_value(child)
        if key in data:
            existing = data[key]
            if not isinstance(existing, list):
                data[key] = [existing]
            data[key].append(value)
        else:
            data[key] = value
    return data


def parse_xml(body: bytes | str, root_element: str | None = None) -> dict[str, Any]:
    try:
        document = ET.fromstring(body)
    except ET.ParseError as exc:
        raise DeserializationError(f"Invalid XML response: {exc}") from exc

    if root_element is None:
        children = list(document)
        if document.tag != "TwilioResponse" or not children:
            node = document
        else:
            node = children[0]
    elif document.tag == root_element:
        node = document
    else:
        node = document.find(root_element)
        if node is None:
            raise DeserializationError(f"Root element '{root_element}' not found in response.")

    value = _element_to_value(node)
    if not isinstance(value, dict):
        raise DeserializationError(f"Element '{node.tag}' does not contain a record.")
    return value


def parse_json(body: bytes | str, root_element: str | None = None) -> dict[str, Any]:
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DeserializationError(f"Invalid JSON response: {exc}") from exc

    if not isinstance(payload, dict):
        raise DeserializationError("JSON response is not an object.")

    # JSON bodies are not wrapped, but tolerate an explicit root key.
    if root_element:
        wrapped = payload.get(root_element)
        if isinstance(wrapped, dict):
            return wrapped
    return payload


def parse_body(body: bytes | str, response_format: str, root_element: str | None = None) -> dict[str, Any]:
    if response_format == "json":
        return parse_json(body, root_element)
    return parse_xml(body, root_element)


def parse_error(body: bytes | str, response_format: str) -> dict[str, Any]:
    """Return ``message``/``code``/``more_info`` from a RestException body, if any."""

    if not body:
        return {}
    try:
        if response_format == "json":
            data = parse_json(body)
        else:
            data = parse_xml(body, "RestException")
    except DeserializationError:
        LOGGER.debug("Error body is not a RestException payload")
        return {}

    code = data.get("code")
    try:
        code = int(code) if code is not None else None
    except (TypeError, ValueError):
        code = None
    return {
        "message": data.get("message"),
        "code": code,
        "more_info": data.get("more_info"),
    }


def to_record(model: type[ModelT], data: dict[str, Any]) -> ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise DeserializationError(f"Response does not match {model.__name__}: {exc}") from exc

"""XML response writer.

The value decides its own element mapping:

- an ``ElementTree.Element`` is written as is
- a pydantic model becomes one element named by its ``xml_tag`` class
  variable (or its class name); each field becomes a child element named by
  its alias (or its name), except fields listed in ``xml_attrs``, which become
  attributes

Example::

    class Greeting(BaseModel):
        xml_tag: ClassVar[str] = "Response"
        xml_attrs: ClassVar[tuple[str, ...]] = ("lang",)

        lang: str
        message: str = Field(alias="Message")

    Greeting(lang="en", Message="hi")  ->  <Response lang="en"><Message>hi</Message></Response>
"""

import logging
from collections.abc import Mapping
from datetime import date, time
from enum import Enum
from typing import Any
from xml.etree import ElementTree as ET

from fastapi import status
from pydantic import BaseModel

from webresponse.errors import XML_MARSHAL, MarshalError
from webresponse.schemas.error import new_error_response
from webresponse.sink import ResponseSink
from webresponse.writers.json import write_json

XML_CONTENT_TYPE = "application/xml"

logger = logging.getLogger(__name__)


def _unsupported(value: Any) -> TypeError:
    return TypeError(f"xml: unsupported type: {type(value).__name__}")


def _text(value: Any) -> str:
    if isinstance(value, Enum):
        return _text(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (date, time)):
        return value.isoformat()
    if isinstance(value, (Mapping, list, tuple, set)):
        raise _unsupported(value)
    return str(value)


def _append(parent: ET.Element, tag: str, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, ET.Element):
        parent.append(value)
    elif isinstance(value, BaseModel):
        parent.append(model_to_element(value, tag))
    elif isinstance(value, (list, tuple)):
        for item in value:
            _append(parent, tag, item)
    else:
        text = _text(value)
        ET.SubElement(parent, tag).text = text


def model_to_element(model: BaseModel, tag: str | None = None) -> ET.Element:
    """Build the element tree for a pydantic model."""
    model_cls = type(model)
    element = ET.Element(tag or getattr(model_cls, "xml_tag", None) or model_cls.__name__)
    attrs = getattr(model_cls, "xml_attrs", ())

    for name, field in model_cls.model_fields.items():
        value = getattr(model, name)
        field_tag = field.serialization_alias or field.alias or name
        if name in attrs:
            if value is not None:
                element.set(field_tag, _text(value))
            continue
        _append(element, field_tag, value)
    return element


def marshal_xml(value: Any) -> bytes:
    """
    Serialize a value to XML, without an XML declaration.

    Raises:
        MarshalError: If the value has no XML mapping
    """
    try:
        if isinstance(value, ET.Element):
            element = value
        elif isinstance(value, BaseModel):
            element = model_to_element(value)
        else:
            raise _unsupported(value)
        text = ET.tostring(element, encoding="unicode", short_empty_elements=False)
    except (TypeError, ValueError) as exc:
        raise MarshalError(XML_MARSHAL, str(exc)) from exc
    return text.encode("utf-8")


def write_xml(value: Any, sink: ResponseSink, status_code: int) -> None:
    """
    Write a value as XML to the sink.

    Failures are reported the same way as for JSON: a 500 xml_marshal JSON
    error envelope is written and the MarshalError is re-raised.
    """
    try:
        data = marshal_xml(value)
    except MarshalError as exc:
        logger.warning(f"Failed to marshal XML response body: {exc}")
        fallback = new_error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, XML_MARSHAL, "failed to marshal XML"
        )
        write_json(fallback, sink, status.HTTP_500_INTERNAL_SERVER_ERROR)
        raise
    sink.headers["Content-Type"] = XML_CONTENT_TYPE
    sink.write_header(status_code)
    sink.write(data)

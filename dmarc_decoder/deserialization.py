import gzip
import io
import ipaddress
import os.path
from typing import Callable, Generator, Mapping
from xml.etree import ElementTree
from zipfile import BadZipFile, ZipFile

import structlog
from xsdata.exceptions import ConverterError, ConverterWarning, ParserError
from xsdata.formats.dataclass.context import XmlContext
from xsdata.formats.dataclass.parsers import XmlParser
from xsdata.formats.dataclass.parsers.config import ParserConfig
from xsdata.formats.dataclass.parsers.handlers import XmlEventHandler

from dmarc_decoder.errors import InvalidDocument, ReportExtractionError
from dmarc_decoder.model.dmarc_aggregate_report import Feedback

logger = structlog.get_logger()


def _create_parser() -> XmlParser:
    return XmlParser(
        context=XmlContext(),
        config=ParserConfig(
            fail_on_unknown_properties=False,
            fail_on_converter_warnings=True,
        ),
        handler=XmlEventHandler,
    )


def _strip_namespaces(data: bytes) -> bytes:
    # Bind by local name so that reports declaring a default namespace
    # (e.g. urn:ietf:params:xml:ns:dmarc-2.0) decode like plain ones.
    root = ElementTree.fromstring(data)
    for element in root.iter():
        if isinstance(element.tag, str):
            element.tag = element.tag.rpartition("}")[2]
    return ElementTree.tostring(root)


def _check_source_ips(feedback: Feedback):
    for index, record in enumerate(feedback.record):
        source_ip = record.row and record.row.source_ip
        if not source_ip:
            continue
        try:
            ipaddress.ip_address(source_ip.strip())
        except ValueError as err:
            raise InvalidDocument(
                f"record {index}: invalid source_ip '{source_ip}'"
            ) from err


def decode_report(data: bytes) -> Feedback:
    try:
        feedback = _create_parser().from_bytes(_strip_namespaces(data), Feedback)
    except (ParserError, ConverterError, ConverterWarning, SyntaxError) as err:
        raise InvalidDocument(str(err) or type(err).__name__) from err
    _check_source_ips(feedback)
    logger.debug(
        "decoded aggregate report",
        org_name=feedback.report_metadata and feedback.report_metadata.org_name,
        report_id=feedback.report_metadata and feedback.report_metadata.report_id,
        records=len(feedback.record),
    )
    return feedback


def handle_application_gzip(
    _filename: str, gzip_bytes: bytes
) -> Generator[bytes, None, None]:
    yield gzip.decompress(gzip_bytes)


def handle_application_zip(
    _filename: str, zip_bytes: bytes
) -> Generator[bytes, None, None]:
    with ZipFile(io.BytesIO(zip_bytes), "r") as zip_file:
        for name in zip_file.namelist():
            with zip_file.open(name, "r") as f:
                yield f.read()


def handle_text_xml(_filename: str, content: bytes) -> Generator[bytes, None, None]:
    yield content


file_extension_handlers: Mapping[str, Callable[..., Generator[bytes, None, None]]] = {
    ".gz": handle_application_gzip,
    ".zip": handle_application_zip,
    ".xml": handle_text_xml,
}


def extract_report_payloads(
    filename: str, content: bytes
) -> Generator[bytes, None, None]:
    _, file_extension = os.path.splitext(filename)
    handler = file_extension_handlers.get(file_extension.lower())
    if handler is None:
        raise ReportExtractionError(filename)
    try:
        yield from handler(filename, content)
    except (OSError, EOFError, BadZipFile) as err:
        raise ReportExtractionError(filename) from err

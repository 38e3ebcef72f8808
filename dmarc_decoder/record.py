from typing import Any, Callable, Dict, Mapping, Tuple

import structlog

from dmarc_decoder.errors import (
    InvalidParameterValue,
    MalformedParameter,
    MissingParameter,
)
from dmarc_decoder.fields import (
    parse_alignment_mode,
    parse_failure_options,
    parse_percent,
    parse_policy,
    parse_report_formats,
    parse_report_interval,
)
from dmarc_decoder.mailbox import decode_uri_list
from dmarc_decoder.policy import Record

logger = structlog.get_logger()

DMARC_VERSION = "DMARC1"

# Optional tags in validation order, each mapped to the record field it
# populates and the validator producing the field value.
optional_tags: Mapping[str, Tuple[str, Callable[[str], Any]]] = {
    "adkim": ("dkim_alignment", lambda value: parse_alignment_mode(value, "adkim")),
    "aspf": ("spf_alignment", lambda value: parse_alignment_mode(value, "aspf")),
    "fo": ("failure_options", lambda value: tuple(parse_failure_options(value))),
    "pct": ("percent", parse_percent),
    "rf": ("report_formats", lambda value: tuple(parse_report_formats(value))),
    "ri": ("report_interval", parse_report_interval),
    "rua": (
        "aggregate_report_uris",
        lambda value: tuple(decode_uri_list(value, "rua")),
    ),
    "ruf": (
        "failure_report_uris",
        lambda value: tuple(decode_uri_list(value, "ruf")),
    ),
    "sp": ("subdomain_policy", lambda value: parse_policy(value, "sp")),
}


def tokenize(text: str) -> Dict[str, str]:
    params: Dict[str, str] = {}
    for segment in text.split(";"):
        segment = segment.strip()
        if not segment:
            continue
        tag, separator, value = segment.partition("=")
        if not separator:
            raise MalformedParameter(segment)
        tag = tag.strip()
        if tag in params:
            logger.debug("overwriting duplicate tag", tag=tag)
        params[tag] = value.strip()
    return params


def decode_record(text: str, *, strict_version: bool = False) -> Record:
    params = tokenize(text)

    if "v" not in params:
        raise MissingParameter("v")
    version = params["v"]
    if version != DMARC_VERSION:
        if strict_version:
            raise InvalidParameterValue("v")
        logger.warning("unexpected record version", version=version)

    if "p" not in params:
        raise MissingParameter("p")
    policy = parse_policy(params["p"], "p")

    values: Dict[str, Any] = {"subdomain_policy": policy}
    for tag, (field_name, parse) in optional_tags.items():
        if tag in params:
            values[field_name] = parse(params[tag])

    for tag in sorted(params.keys() - optional_tags.keys() - {"v", "p"}):
        logger.debug("ignoring unknown tag", tag=tag)

    return Record(version=version, policy=policy, **values)

import argparse
import json
import sys
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

import structlog
from xsdata.formats.dataclass.serializers import JsonSerializer

from dmarc_decoder.deserialization import decode_report, extract_report_payloads
from dmarc_decoder.errors import DecodeError, ReportExtractionError
from dmarc_decoder.logging import configure_logging
from dmarc_decoder.policy import Record
from dmarc_decoder.record import decode_record
from dmarc_decoder.report_summary import ReportSummary

logger = structlog.get_logger()


def record_to_dict(record: Record) -> Dict[str, Any]:
    def convert(value):
        if isinstance(value, Enum):
            return value.value
        if isinstance(value, tuple):
            return [convert(item) for item in value]
        return value

    return {
        "version": record.version,
        "policy": convert(record.policy),
        "subdomain_policy": convert(record.subdomain_policy),
        "dkim_alignment": convert(record.dkim_alignment),
        "spf_alignment": convert(record.spf_alignment),
        "failure_options": convert(record.failure_options),
        "percent": record.percent,
        "report_formats": convert(record.report_formats),
        "report_interval_seconds": int(record.report_interval.total_seconds()),
        "aggregate_report_uris": convert(record.aggregate_report_uris),
        "failure_report_uris": convert(record.failure_report_uris),
    }


class App:
    def __init__(self, *, strict_version: bool = False, out=None):
        self.strict_version = strict_version
        self.out = out or sys.stdout
        self.serializer = JsonSerializer()

    def _emit(self, document: Dict[str, Any]):
        print(json.dumps(document), file=self.out)

    def process_record(self, text: str) -> bool:
        try:
            record = decode_record(text, strict_version=self.strict_version)
        except DecodeError as err:
            logger.error(
                "failed to decode policy record",
                kind=err.kind.name,
                parameter=err.parameter,
            )
            return False
        self._emit(record_to_dict(record))
        return True

    def process_report_file(self, path: Path) -> bool:
        try:
            payloads = list(extract_report_payloads(path.name, path.read_bytes()))
        except (OSError, ReportExtractionError) as err:
            logger.error(str(err), path=str(path))
            return False

        success = True
        for payload in payloads:
            try:
                report = decode_report(payload)
            except DecodeError as err:
                logger.error(
                    "failed to decode aggregate report",
                    path=str(path),
                    kind=err.kind.name,
                    parameter=err.parameter,
                )
                success = False
                continue
            self._emit(
                {
                    "file": str(path),
                    "report": json.loads(self.serializer.render(report)),
                    "summary": ReportSummary.from_feedback(report).as_dict(),
                }
            )
        return success


def main(argv: Sequence[str], out=None) -> int:
    parser = argparse.ArgumentParser(
        description="Decode DMARC policy records and DMARC aggregate reports."
    )
    parser.add_argument(
        "--configuration",
        type=argparse.FileType("r"),
        default=None,
        help="Configuration file",
    )
    parser.add_argument(
        "--debug",
        default=False,
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    record_parser = subparsers.add_parser("record", help="Decode a policy record")
    record_parser.add_argument("text", help="DMARC policy record (TXT value)")
    report_parser = subparsers.add_parser(
        "report", help="Decode aggregate reports (.xml, .gz or .zip)"
    )
    report_parser.add_argument("files", nargs="+", type=Path)
    args = parser.parse_args(argv)

    configuration: Dict[str, Any] = {}
    if args.configuration:
        configuration = json.load(args.configuration)
        args.configuration.close()

    configure_logging(configuration.get("logging", {}), debug=args.debug)

    app = App(strict_version=configuration.get("strict_version", False), out=out)
    if args.command == "record":
        return 0 if app.process_record(args.text) else 1

    results = [app.process_report_file(path) for path in args.files]
    return 0 if all(results) else 1


def cli(argv: Optional[Sequence[str]] = None):
    sys.exit(main(sys.argv[1:] if argv is None else argv))

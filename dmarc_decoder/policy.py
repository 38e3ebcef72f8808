from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Tuple


class Policy(Enum):
    NONE_VALUE = "none"
    QUARANTINE = "quarantine"
    REJECT = "reject"


class AlignmentMode(Enum):
    RELAXED = "r"
    STRICT = "s"


class FailureOption(Enum):
    ALL = "0"
    ANY = "1"
    DKIM = "d"
    SPF = "s"


class ReportFormat(Enum):
    AFRF = "afrf"


DEFAULT_PERCENT = 100
DEFAULT_REPORT_INTERVAL = timedelta(seconds=86400)


@dataclass(frozen=True)
class Record:
    # pylint: disable=too-many-instance-attributes
    version: str
    policy: Policy
    subdomain_policy: Policy
    dkim_alignment: AlignmentMode = AlignmentMode.RELAXED
    spf_alignment: AlignmentMode = AlignmentMode.RELAXED
    failure_options: Tuple[FailureOption, ...] = ()
    percent: int = DEFAULT_PERCENT
    report_formats: Tuple[ReportFormat, ...] = (ReportFormat.AFRF,)
    report_interval: timedelta = DEFAULT_REPORT_INTERVAL
    aggregate_report_uris: Tuple[str, ...] = ()
    failure_report_uris: Tuple[str, ...] = ()

    @property
    def effective_failure_options(self) -> Tuple[FailureOption, ...]:
        return self.failure_options or (FailureOption.ALL,)

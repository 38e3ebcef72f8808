from dataclasses import dataclass, field
from typing import Dict, Optional

from dmarc_decoder.model.dmarc_aggregate_report import Feedback, RecordType
from dmarc_decoder.policy import Policy

PASS_VALUE = "pass"


def _map_disposition(disposition: Optional[str]) -> Optional[Policy]:
    if disposition is None:
        return None
    try:
        return Policy(disposition.strip())
    except ValueError:
        return None


@dataclass
class ReportSummary:
    total_count: int = 0
    disposition_counts: Dict[Policy, int] = field(default_factory=dict)
    unknown_disposition_count: int = 0
    dkim_pass_count: int = 0
    spf_pass_count: int = 0

    @classmethod
    def from_feedback(cls, feedback: Feedback) -> "ReportSummary":
        summary = cls()
        for record in feedback.record:
            summary.update(record)
        return summary

    def update(self, record: RecordType):
        if record.row is None:
            return
        count = record.row.count or 0
        self.total_count += count

        evaluated = record.row.policy_evaluated
        disposition = _map_disposition(evaluated and evaluated.disposition)
        if disposition is None:
            self.unknown_disposition_count += count
        else:
            if disposition not in self.disposition_counts:
                self.disposition_counts[disposition] = 0
            self.disposition_counts[disposition] += count

        if evaluated and evaluated.dkim == PASS_VALUE:
            self.dkim_pass_count += count
        if evaluated and evaluated.spf == PASS_VALUE:
            self.spf_pass_count += count

    @property
    def passed(self) -> int:
        return self.disposition_counts.get(Policy.NONE_VALUE, 0)

    @property
    def quarantined(self) -> int:
        return self.disposition_counts.get(Policy.QUARANTINE, 0)

    @property
    def rejected(self) -> int:
        return self.disposition_counts.get(Policy.REJECT, 0)

    def as_dict(self) -> Dict[str, int]:
        return {
            "total": self.total_count,
            "pass": self.passed,
            "quarantine": self.quarantined,
            "reject": self.rejected,
            "unknown_disposition": self.unknown_disposition_count,
            "dkim_pass": self.dkim_pass_count,
            "spf_pass": self.spf_pass_count,
        }

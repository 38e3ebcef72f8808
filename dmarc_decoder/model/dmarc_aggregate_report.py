from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

# Leaf values are kept as the text of the document. Checking them against
# the policy enumerations is up to the consumer of a decoded report.


@dataclass(frozen=True)
class DateRangeType:
    begin: Optional[int] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )
    end: Optional[int] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )


@dataclass(frozen=True)
class ReportMetadataType:
    org_name: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )
    email: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )
    extra_contact_info: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )
    report_id: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )
    date_range: Optional[DateRangeType] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )
    error: List[str] = field(
        default_factory=list,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )


@dataclass(frozen=True)
class PolicyPublishedType:
    domain: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )
    adkim: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )
    aspf: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )
    p: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )
    sp: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )
    pct: Optional[int] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )
    np: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )
    fo: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )


@dataclass(frozen=True)
class PolicyEvaluatedType:
    disposition: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )
    dkim: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )
    spf: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )


@dataclass(frozen=True)
class RowType:
    source_ip: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )
    count: Optional[int] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )
    policy_evaluated: Optional[PolicyEvaluatedType] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )


@dataclass(frozen=True)
class IdentifierType:
    envelope_to: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )
    envelope_from: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )
    header_from: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )


@dataclass(frozen=True)
class DkimAuthResultType:
    class Meta:
        name = "DKIMAuthResultType"

    domain: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )
    selector: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )
    result: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )


@dataclass(frozen=True)
class SpfAuthResultType:
    class Meta:
        name = "SPFAuthResultType"

    domain: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )
    scope: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )
    result: Optional[str] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )


@dataclass(frozen=True)
class AuthResultType:
    dkim: List[DkimAuthResultType] = field(
        default_factory=list,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )
    spf: Optional[SpfAuthResultType] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )


@dataclass(frozen=True)
class RecordType:
    row: Optional[RowType] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )
    identifiers: Optional[IdentifierType] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )
    auth_results: Optional[AuthResultType] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )


@dataclass(frozen=True)
class Feedback:
    class Meta:
        name = "feedback"

    version: Optional[Decimal] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )
    report_metadata: Optional[ReportMetadataType] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )
    policy_published: Optional[PolicyPublishedType] = field(
        default=None,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )
    record: List[RecordType] = field(
        default_factory=list,
        metadata={
            "type": "Element",
            "namespace": "",
        },
    )

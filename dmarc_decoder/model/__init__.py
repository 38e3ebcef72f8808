from dmarc_decoder.model.dmarc_aggregate_report import (
    AuthResultType,
    DateRangeType,
    DkimAuthResultType,
    Feedback,
    IdentifierType,
    PolicyEvaluatedType,
    PolicyPublishedType,
    RecordType,
    ReportMetadataType,
    RowType,
    SpfAuthResultType,
)

__all__ = [
    "AuthResultType",
    "DateRangeType",
    "DkimAuthResultType",
    "Feedback",
    "IdentifierType",
    "PolicyEvaluatedType",
    "PolicyPublishedType",
    "RecordType",
    "ReportMetadataType",
    "RowType",
    "SpfAuthResultType",
]

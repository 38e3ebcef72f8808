import gzip
import io
from zipfile import ZipFile

import pytest

from dmarc_decoder.deserialization import decode_report, extract_report_payloads
from dmarc_decoder.errors import (
    DecodeErrorKind,
    InvalidDocument,
    ReportExtractionError,
)
from dmarc_decoder.model.tests.sample_data import (
    SAMPLE_DATACLASS,
    create_multi_record_xml,
    create_sample_xml,
)


def test_decodes_report():
    assert decode_report(create_sample_xml().encode("utf-8")) == SAMPLE_DATACLASS


def test_decoding_is_idempotent():
    data = create_multi_record_xml().encode("utf-8")
    assert decode_report(data) == decode_report(data)


def test_decodes_records_in_document_order():
    report = decode_report(create_multi_record_xml().encode("utf-8"))

    assert [record.row.source_ip for record in report.record] == [
        f"192.0.2.{index}" for index in range(1, 8)
    ]
    assert [record.row.policy_evaluated.disposition for record in report.record] == [
        "none",
        "none",
        "quarantine",
        "reject",
        "reject",
        "reject",
        "reject",
    ]
    assert [record.row.count for record in report.record] == [1] * 7


def test_keeps_policy_published_as_snapshot():
    report = decode_report(create_multi_record_xml().encode("utf-8"))

    policy = report.policy_published
    assert (policy.domain, policy.adkim, policy.aspf) == ("example.com", "s", "r")
    assert (policy.p, policy.sp, policy.pct, policy.np) == (
        "reject",
        "quarantine",
        100,
        None,
    )
    assert report.report_metadata.date_range.begin == 1700000000
    assert report.report_metadata.date_range.end == 1700086399


def test_does_not_validate_business_rules():
    report = decode_report(
        create_multi_record_xml(["bogus"]).encode("utf-8")
    )
    assert report.record[0].row.policy_evaluated.disposition == "bogus"


def test_record_without_dkim_results_has_empty_dkim_list():
    report = decode_report(create_multi_record_xml(["none"]).encode("utf-8"))

    auth_results = report.record[0].auth_results
    assert auth_results.dkim == []
    assert auth_results.spf.domain == "example.com"
    assert auth_results.spf.result == "pass"


def test_decodes_report_without_records():
    report = decode_report(create_multi_record_xml([]).encode("utf-8"))
    assert report.record == []
    assert report.report_metadata.report_id == "multi-0001"


@pytest.mark.parametrize(
    "namespace",
    ["urn:ietf:params:xml:ns:dmarc-2.0", "http://dmarc.org/dmarc-xml/0.1"],
)
def test_decodes_report_with_default_namespace(namespace):
    xml = create_sample_xml().replace("<feedback>", f'<feedback xmlns="{namespace}">')
    assert decode_report(xml.encode("utf-8")) == SAMPLE_DATACLASS


def test_decodes_report_with_prefixed_namespace():
    xml = create_multi_record_xml(["reject"])
    xml = xml.replace(
        "<feedback>", '<d:feedback xmlns:d="urn:ietf:params:xml:ns:dmarc-2.0">'
    )
    xml = xml.replace("</feedback>", "</d:feedback>")
    xml = xml.replace("<record>", "<d:record>").replace("</record>", "</d:record>")

    report = decode_report(xml.encode("utf-8"))

    assert report.report_metadata.report_id == "multi-0001"
    assert len(report.record) == 1
    assert report.record[0].row.source_ip == "192.0.2.1"
    assert report.record[0].row.count == 1
    assert report.record[0].row.policy_evaluated.disposition == "reject"


def test_accepts_whitespace_around_source_ip():
    xml = create_multi_record_xml(["none"], source_ip=" 192.0.2.{index} ")
    report = decode_report(xml.encode("utf-8"))
    assert report.record[0].row.source_ip.strip() == "192.0.2.1"


def test_ignores_unknown_elements():
    xml = create_sample_xml().replace(
        "<org_name>", "<vendor_extension>x</vendor_extension><org_name>"
    )
    assert decode_report(xml.encode("utf-8")) == SAMPLE_DATACLASS


@pytest.mark.parametrize(
    "data",
    [
        pytest.param(
            create_sample_xml().replace("</feedback>", "").encode("utf-8"),
            id="unclosed root",
        ),
        pytest.param(
            create_sample_xml().replace("</row>", "").encode("utf-8"),
            id="unclosed row",
        ),
        pytest.param(b"", id="empty"),
        pytest.param(b"not xml at all", id="not xml"),
        pytest.param(
            create_multi_record_xml(["none"], count="many").encode("utf-8"),
            id="non-numeric count",
        ),
        pytest.param(
            create_multi_record_xml(["none"], source_ip="192.0.2.300").encode(
                "utf-8"
            ),
            id="invalid source ip",
        ),
        pytest.param(
            create_sample_xml()
            .replace("<begin>1607299200</begin>", "<begin>yesterday</begin>")
            .encode("utf-8"),
            id="non-numeric begin",
        ),
    ],
)
def test_invalid_documents_fail_with_invalid_document(data):
    with pytest.raises(InvalidDocument) as err:
        decode_report(data)
    assert err.value.kind == DecodeErrorKind.INVALID_DOCUMENT


def test_invalid_source_ip_error_names_record():
    data = create_multi_record_xml(
        ["none", "reject"], source_ip="host-{index}"
    ).encode("utf-8")
    with pytest.raises(InvalidDocument) as err:
        decode_report(data)
    assert "record 0" in err.value.parameter


def test_extracts_plain_xml():
    content = create_sample_xml().encode("utf-8")
    assert list(extract_report_payloads("report.xml", content)) == [content]


def test_extracts_gzipped_xml():
    content = create_sample_xml().encode("utf-8")
    compressed = gzip.compress(content)
    assert list(extract_report_payloads("report.xml.gz", compressed)) == [content]


def test_extracts_zipped_xml():
    content = create_sample_xml().encode("utf-8")
    compressed = io.BytesIO()
    with ZipFile(compressed, "w") as zip_file:
        zip_file.writestr("reporter.com!mydomain.de!1607299200!1607385599.xml", content)
    assert list(extract_report_payloads("report.zip", compressed.getvalue())) == [
        content
    ]


def test_extraction_fails_for_unknown_file_type():
    with pytest.raises(ReportExtractionError) as err:
        list(extract_report_payloads("report.pdf", b"%PDF"))
    assert err.value.filename == "report.pdf"


def test_extraction_fails_for_corrupt_archive():
    with pytest.raises(ReportExtractionError):
        list(extract_report_payloads("report.zip", b"not a zip file"))

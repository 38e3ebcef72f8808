from typing import List

from email_validator import EmailNotValidError, validate_email

from dmarc_decoder.errors import InvalidURI

MAILTO_SCHEME = "mailto:"


def normalize_mailbox(address: str) -> str:
    """Validate the syntax of a mail address and return its normalized form.

    Only the address syntax is checked, the domain is not resolved. Quoted
    local parts, domain literals, non-public domains and a display name
    around the address are accepted; the display name is dropped.
    """
    return validate_email(
        address,
        check_deliverability=False,
        globally_deliverable=False,
        allow_quoted_local=True,
        allow_domain_literal=True,
        allow_display_name=True,
    ).normalized


def decode_uri_list(value: str, tag: str) -> List[str]:
    uris = []
    for index, entry in enumerate(value.split(",")):
        entry = entry.strip()
        if not entry.startswith(MAILTO_SCHEME):
            raise InvalidURI(tag, index)
        try:
            address = normalize_mailbox(entry[len(MAILTO_SCHEME) :])
        except EmailNotValidError as err:
            raise InvalidURI(tag, index) from err
        uris.append(MAILTO_SCHEME + address)
    return uris

"""Table QR Codes: build the QR image URL printed on each table."""

from urllib.parse import urlencode

QR_CODE_SIZE = "200x200"


def build_table_link(table_link_base_url: str, table_number: str) -> str:
    return f"{table_link_base_url.rstrip('/')}/{table_number}"


def build_table_qr_url(
    qr_code_service_url: str, table_link_base_url: str, table_number: str,
) -> str:
    """QR image URL whose payload is the public link of the table."""
    query = urlencode({
        "size": QR_CODE_SIZE,
        "data": build_table_link(table_link_base_url, table_number),
    })
    return f"{qr_code_service_url}?{query}"

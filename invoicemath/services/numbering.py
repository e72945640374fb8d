"""Document number generators (INV-0001, PROP-0001)"""


def format_document_number(prefix: str, sequence: int) -> str:
    if sequence < 1:
        raise ValueError("sequence must start at 1")
    return f"{prefix}-{sequence:04d}"

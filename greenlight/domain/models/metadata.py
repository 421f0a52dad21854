import math

from pydantic import BaseModel


class Metadata(BaseModel):
    current_page: int = 0
    page_size: int = 0
    first_page: int = 0
    last_page: int = 0
    total_records: int = 0


def calculate_metadata(total_records: int, page: int, page_size: int) -> Metadata:
    """Summarize a result set of ``total_records`` rows split into pages.

    An empty result set yields an all-zero ``Metadata`` regardless of the
    requested page, which is how callers tell "nothing matched" apart from a
    page past the end. A non-positive page size carries no paging either.
    """
    if total_records == 0 or page_size < 1:
        return Metadata()

    return Metadata(
        current_page=page,
        page_size=page_size,
        first_page=1,
        last_page=math.ceil(total_records / page_size),
        total_records=total_records,
    )

"""Page-data files: JSON header + template body."""

from pagesmith.page.composer import (
    CONTENT_SENTINEL,
    PageInput,
    load_page_input,
    load_page_input_file,
    render_page,
    split_header,
)
from pagesmith.page.jsonc import decode_object, strip_comments

__all__ = [
    "CONTENT_SENTINEL",
    "PageInput",
    "load_page_input",
    "load_page_input_file",
    "render_page",
    "split_header",
    "decode_object",
    "strip_comments",
]

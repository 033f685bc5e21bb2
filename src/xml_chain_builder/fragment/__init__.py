"""Pure fragment construction for composable XML building.

Key Components:
    Fragment: Immutable buffer of accumulated markup
    Option: Attribute label/value pair
    new, new_document, new_advanced_document: Fragment constructors
    tag, cdata_tag, option_content_tag, option_tag, block_tag,
    option_block_tag, comment, block_comment: Builder operations
    end_xml: Finalizer producing the XML string
"""

from .fragment import (
    Fragment,
    Option,
    new,
    new_advanced_document,
    new_document,
    render_declaration,
    render_options,
)
from .operations import (
    block_comment,
    block_tag,
    cdata_tag,
    comment,
    option_block_tag,
    option_content_tag,
    option_tag,
    tag,
)
from .finalizer import end_xml

__all__ = [
    "Fragment",
    "Option",
    "new",
    "new_advanced_document",
    "new_document",
    "render_declaration",
    "render_options",
    "block_comment",
    "block_tag",
    "cdata_tag",
    "comment",
    "option_block_tag",
    "option_content_tag",
    "option_tag",
    "tag",
    "end_xml",
]

"""XML Chain Builder.

A composable builder for well-formed XML text. Tags, attributes, comments,
CDATA sections and nested blocks are assembled by composing pure functions
over an outcome that is either a fragment of markup or the first error met.

Progressive API Disclosure:
- Level 1: Pure operations - new(), tag(), block_tag(), ..., end_xml()
- Level 2: Composition helpers - step(), pipe()
- Level 3: Configured fluent builder - XMLBuilder with BuilderConfig
"""

__version__ = "0.1.0"
__author__ = "XML Chain Builder Team"

# Level 1: Pure constructors, operations and finalizer
from .fragment import (
    Fragment,
    Option,
    block_comment,
    block_tag,
    cdata_tag,
    comment,
    end_xml,
    new,
    new_advanced_document,
    new_document,
    option_block_tag,
    option_content_tag,
    option_tag,
    tag,
)

# Level 2 and 3: Composition helpers and fluent builder
from .api import XMLBuilder, pipe, step

# Outcome types, errors and configuration
from .shared import (
    BuilderConfig,
    BuilderError,
    Err,
    Ok,
    Outcome,
    OutcomeAccessError,
)

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Constructors, operations and finalizer
    "new",
    "new_document",
    "new_advanced_document",
    "tag",
    "cdata_tag",
    "option_content_tag",
    "option_tag",
    "block_tag",
    "option_block_tag",
    "comment",
    "block_comment",
    "end_xml",

    # Level 2 and 3: Composition
    "step",
    "pipe",
    "XMLBuilder",

    # Data structures and outcomes
    "Fragment",
    "Option",
    "Ok",
    "Err",
    "Outcome",
    "BuilderError",
    "OutcomeAccessError",

    # Configuration
    "BuilderConfig",
]

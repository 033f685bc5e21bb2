"""Builder operations for composing XML fragments.

Each operation takes the current outcome plus its own arguments and returns a
new outcome. Checks run in a fixed order:

1. Required arguments are checked for emptiness, in the order listed by each
   operation. This happens before looking at ``document``, so a bad argument
   is reported even on a pipeline that has already failed.
2. A failed ``document`` is passed through unchanged.
3. A failed ``inner`` is passed through unchanged.
4. The new markup is placed *before* the previously accumulated text, so
   siblings appear in reverse call order.
"""

from typing import Optional, Sequence, Tuple

from xml_chain_builder.shared import BuilderError, Err, Ok, Outcome

from .fragment import Fragment, Option, inner_text, render_options


def _emit(document: Outcome[Fragment], markup: str) -> Outcome[Fragment]:
    if isinstance(document, Err):
        return document
    return Ok(document.value.prepend(markup))


def _first_failure(*checks: Tuple[bool, BuilderError]) -> Optional[Err]:
    for is_empty, error in checks:
        if is_empty:
            return Err(error)
    return None


def tag(document: Outcome[Fragment], label: str, contents: str) -> Outcome[Fragment]:
    """Add ``<label>contents</label>``.

    Errors:
        LABEL_EMPTY, CONTENTS_EMPTY
    """
    failure = _first_failure(
        (not label, BuilderError.LABEL_EMPTY),
        (not contents, BuilderError.CONTENTS_EMPTY),
    )
    if failure is not None:
        return failure
    return _emit(document, f"<{label}>{contents}</{label}>\n")


def cdata_tag(
    document: Outcome[Fragment], label: str, contents: str
) -> Outcome[Fragment]:
    """Add a tag whose contents are wrapped in a CDATA section.

    The contents are written on their own line, indented by a space and a tab.

    Errors:
        LABEL_EMPTY, CONTENTS_EMPTY
    """
    failure = _first_failure(
        (not label, BuilderError.LABEL_EMPTY),
        (not contents, BuilderError.CONTENTS_EMPTY),
    )
    if failure is not None:
        return failure
    return _emit(
        document,
        f"<{label}>\n<![CDATA[\n \t{contents}\n]]>\n</{label}>\n",
    )


def option_content_tag(
    document: Outcome[Fragment],
    label: str,
    contents: str,
    options: Sequence[Option],
) -> Outcome[Fragment]:
    """Add ``<label a="v" ...>contents</label>``.

    Errors:
        LABEL_EMPTY, CONTENTS_EMPTY, OPTIONS_EMPTY
    """
    failure = _first_failure(
        (not label, BuilderError.LABEL_EMPTY),
        (not contents, BuilderError.CONTENTS_EMPTY),
        (not options, BuilderError.OPTIONS_EMPTY),
    )
    if failure is not None:
        return failure
    attributes = render_options(options)
    return _emit(document, f"<{label}{attributes}>{contents}</{label}>\n")


def option_tag(
    document: Outcome[Fragment], label: str, options: Sequence[Option]
) -> Outcome[Fragment]:
    """Add a self-closing ``<label a="v" .../>``.

    Errors:
        LABEL_EMPTY, OPTIONS_EMPTY
    """
    failure = _first_failure(
        (not label, BuilderError.LABEL_EMPTY),
        (not options, BuilderError.OPTIONS_EMPTY),
    )
    if failure is not None:
        return failure
    return _emit(document, f"<{label}{render_options(options)}/>\n")


def block_tag(
    document: Outcome[Fragment], label: str, inner: Outcome[Fragment]
) -> Outcome[Fragment]:
    """Wrap the markup of ``inner`` in ``<label>`` ... ``</label>``.

    Errors:
        LABEL_EMPTY, INNER_EMPTY (also for a failed ``inner``)
    """
    body = inner_text(inner)
    failure = _first_failure(
        (not label, BuilderError.LABEL_EMPTY),
        (not body, BuilderError.INNER_EMPTY),
    )
    if failure is not None:
        return failure
    if isinstance(document, Err):
        return document
    if isinstance(inner, Err):
        return inner
    return _emit(document, f"<{label}>\n{body}</{label}>\n")


def option_block_tag(
    document: Outcome[Fragment],
    label: str,
    inner: Outcome[Fragment],
    options: Sequence[Option],
) -> Outcome[Fragment]:
    """Wrap the markup of ``inner`` in an opening tag carrying attributes.

    A failed ``inner`` is rejected as INNER_EMPTY before either outcome's own
    error is looked at, so neither the outer nor the inner error surfaces.

    Errors:
        LABEL_EMPTY, INNER_EMPTY (also for a failed ``inner``), OPTIONS_EMPTY
    """
    body = inner_text(inner)
    failure = _first_failure(
        (not label, BuilderError.LABEL_EMPTY),
        (not body, BuilderError.INNER_EMPTY),
        (not options, BuilderError.OPTIONS_EMPTY),
    )
    if failure is not None:
        return failure
    if isinstance(document, Err):
        return document
    if isinstance(inner, Err):
        return inner
    attributes = render_options(options)
    return _emit(document, f"<{label}{attributes}>\n{body}</{label}>\n")


def comment(document: Outcome[Fragment], text: str) -> Outcome[Fragment]:
    """Add ``<!-- text -->``; the line ends with a space before the newline.

    Errors:
        CONTENTS_EMPTY
    """
    if not text:
        return Err(BuilderError.CONTENTS_EMPTY)
    return _emit(document, f"<!-- {text} --> \n")


def block_comment(
    document: Outcome[Fragment], inner: Outcome[Fragment]
) -> Outcome[Fragment]:
    """Comment out the markup of ``inner`` between ``<!--`` and ``-->`` lines.

    Errors:
        INNER_EMPTY (also for a failed ``inner``)
    """
    body = inner_text(inner)
    if not body:
        return Err(BuilderError.INNER_EMPTY)
    if isinstance(document, Err):
        return document
    if isinstance(inner, Err):
        return inner
    return _emit(document, f"<!--\n{body}-->\n")

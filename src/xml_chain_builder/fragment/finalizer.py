"""Conversion of a fragment outcome into the final XML string."""

from xml_chain_builder.shared import BuilderError, Err, Ok, Outcome

from .fragment import Fragment


def end_xml(document: Outcome[Fragment]) -> Outcome[str]:
    """Finalize a fragment into its XML text.

    Args:
        document: Outcome produced by a constructor or builder operation

    Returns:
        Ok wrapping the XML text, the original Err of a failed pipeline, or
        Err(EMPTY_DOCUMENT) when nothing was ever added

    Examples:
        >>> from xml_chain_builder.fragment import new, tag
        >>> end_xml(tag(new(), "name", "value"))
        Ok(value='<name>value</name>\\n')
        >>> end_xml(new())
        Err(error=<BuilderError.EMPTY_DOCUMENT: 7>)
    """
    if isinstance(document, Err):
        return document
    if document.value.is_empty:
        return Err(BuilderError.EMPTY_DOCUMENT)
    return Ok(document.value.text)

"""Pipeline composition API for building XML documents.

Progressive disclosure over the pure operations in ``xml_chain_builder.fragment``:

- Level 1: call the operations directly, nesting calls or threading them
  through ``pipe`` with ``step``.
- Level 2: ``XMLBuilder``, an immutable fluent wrapper that carries a
  ``BuilderConfig`` and logs each step when configured to.
"""

from typing import Any, Callable, Optional, Sequence, Union

from xml_chain_builder.fragment import (
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
from xml_chain_builder.shared import BuilderConfig, Err, Outcome, get_logger

Step = Callable[[Outcome[Fragment]], Outcome[Fragment]]


def step(operation: Callable[..., Outcome[Fragment]], *args: Any) -> Step:
    """Bind the arguments of a builder operation, leaving the document open.

    Args:
        operation: Builder operation such as ``tag`` or ``block_tag``
        *args: Arguments that follow ``document`` in the operation signature

    Returns:
        Callable applying ``operation`` to an outcome

    Examples:
        >>> add_name = step(tag, "name", "value")
        >>> add_name(new()).unwrap().text
        '<name>value</name>\\n'
    """
    def apply(document: Outcome[Fragment]) -> Outcome[Fragment]:
        return operation(document, *args)

    apply.__name__ = getattr(operation, "__name__", "step")
    return apply


def pipe(document: Outcome[Fragment], *steps: Step) -> Outcome[Fragment]:
    """Thread an outcome through ``steps`` from left to right.

    Examples:
        >>> result = pipe(new(), step(tag, "a", "1"), step(tag, "b", "2"))
        >>> result.unwrap().text
        '<b>2</b>\\n<a>1</a>\\n'
    """
    for apply in steps:
        document = apply(document)
    return document


InnerType = Union["XMLBuilder", Outcome[Fragment]]


class XMLBuilder:
    """Immutable fluent builder over a fragment outcome.

    Every method returns a new ``XMLBuilder``; the receiver is left untouched,
    so one builder can be reused as the inner content of several blocks.
    Failures follow the same first-failure-wins rules as the underlying
    operations and surface from ``end()``.

    Examples:
        >>> email = XMLBuilder.fragment().tag("email", "e@x.com")
        >>> XMLBuilder.fragment().block_tag("owner", email).end().unwrap()
        '<owner>\\n<email>e@x.com</email>\\n</owner>\\n'
    """

    def __init__(
        self,
        outcome: Optional[Outcome[Fragment]] = None,
        config: Optional[BuilderConfig] = None,
    ) -> None:
        """Initialize builder.

        Args:
            outcome: Starting outcome; defaults to an empty fragment
            config: Builder configuration; defaults to ``BuilderConfig()``
        """
        self._outcome = outcome if outcome is not None else new()
        self.config = config or BuilderConfig()
        self.logger = get_logger(
            __name__, self.config.effective_correlation_id, "xml_builder"
        )

    @classmethod
    def fragment(cls, config: Optional[BuilderConfig] = None) -> "XMLBuilder":
        """Start from an empty fragment with no declaration."""
        return cls(new(), config)

    @classmethod
    def document(cls, config: Optional[BuilderConfig] = None) -> "XMLBuilder":
        """Start from a fragment seeded with the configured declaration."""
        config = config or BuilderConfig()
        declaration = config.declaration
        if declaration.is_default:
            return cls(new_document(), config)
        return cls(
            new_advanced_document(declaration.version, declaration.encoding),
            config,
        )

    @property
    def outcome(self) -> Outcome[Fragment]:
        """The wrapped fragment outcome."""
        return self._outcome

    def is_err(self) -> bool:
        return isinstance(self._outcome, Err)

    def __repr__(self) -> str:
        return f"XMLBuilder({self._outcome!r})"

    def _apply(
        self, operation: Callable[..., Outcome[Fragment]], *args: Any
    ) -> "XMLBuilder":
        result = operation(self._outcome, *args)
        self._log_step(operation.__name__, result)
        return XMLBuilder(result, self.config)

    def _log_step(self, operation_name: str, result: Outcome[Fragment]) -> None:
        settings = self.config.logging
        if not settings.enable_operation_logging:
            return

        extra = {"operation": operation_name, "success": not isinstance(result, Err)}
        if isinstance(result, Err):
            extra["error"] = result.error.name
            message = f"Builder step {operation_name} failed: {result.error.description}"
        else:
            extra["fragment_length"] = len(result.value.text)
            message = f"Builder step {operation_name} applied"

        self.logger.log(settings.numeric_level, message, extra=extra)

    @staticmethod
    def _inner_outcome(inner: InnerType) -> Outcome[Fragment]:
        if isinstance(inner, XMLBuilder):
            return inner.outcome
        return inner

    def tag(self, label: str, contents: str) -> "XMLBuilder":
        return self._apply(tag, label, contents)

    def cdata_tag(self, label: str, contents: str) -> "XMLBuilder":
        return self._apply(cdata_tag, label, contents)

    def option_content_tag(
        self, label: str, contents: str, options: Sequence[Option]
    ) -> "XMLBuilder":
        return self._apply(option_content_tag, label, contents, options)

    def option_tag(self, label: str, options: Sequence[Option]) -> "XMLBuilder":
        return self._apply(option_tag, label, options)

    def block_tag(self, label: str, inner: InnerType) -> "XMLBuilder":
        return self._apply(block_tag, label, self._inner_outcome(inner))

    def option_block_tag(
        self, label: str, inner: InnerType, options: Sequence[Option]
    ) -> "XMLBuilder":
        return self._apply(
            option_block_tag, label, self._inner_outcome(inner), options
        )

    def comment(self, text: str) -> "XMLBuilder":
        return self._apply(comment, text)

    def block_comment(self, inner: InnerType) -> "XMLBuilder":
        return self._apply(block_comment, self._inner_outcome(inner))

    def end(self) -> Outcome[str]:
        """Finalize the accumulated markup with ``end_xml``.

        Returns:
            Ok wrapping the XML text, or the Err explaining why there is none
        """
        result = end_xml(self._outcome)
        if isinstance(result, Err) and self.config.logging.enable_operation_logging:
            self.logger.warning(
                f"Document finalization failed: {result.error.description}",
                extra={"operation": "end_xml", "error": result.error.name},
            )
        return result

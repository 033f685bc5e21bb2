"""Tests for pipeline composition and the fluent XMLBuilder."""

import logging

import pytest

from xml_chain_builder.api import XMLBuilder, pipe, step
from xml_chain_builder.fragment import (
    Fragment,
    Option,
    block_tag,
    comment,
    end_xml,
    new,
    option_tag,
    tag,
)
from xml_chain_builder.shared import (
    BuilderConfig,
    BuilderError,
    DeclarationConfig,
    Err,
    Ok,
)


class TestStepAndPipe:
    """Test step binding and left-to-right piping."""

    def test_step_binds_trailing_arguments(self) -> None:
        add_link = step(option_tag, "link", [Option("href", "/")])

        assert add_link(new()) == option_tag(new(), "link", [Option("href", "/")])
        assert add_link.__name__ == "option_tag"

    def test_pipe_without_steps_returns_input(self) -> None:
        start = new()

        assert pipe(start) is start

    def test_pipe_preserves_reverse_sibling_order(self) -> None:
        result = pipe(new(), step(tag, "a", "1"), step(tag, "b", "2"))

        assert end_xml(result) == Ok("<b>2</b>\n<a>1</a>\n")

    def test_pipe_nests_inner_pipelines(self) -> None:
        inner = pipe(new(), step(tag, "email", "e@x.com"))
        result = pipe(new(), step(block_tag, "owner", inner), step(comment, "end"))

        assert end_xml(result) == Ok(
            "<!-- end --> \n<owner>\n<email>e@x.com</email>\n</owner>\n"
        )

    def test_pipe_short_circuits_on_first_error(self) -> None:
        result = pipe(
            new(),
            step(tag, "a", ""),
            step(tag, "b", "2"),
            step(comment, "note"),
        )

        assert result == Err(BuilderError.CONTENTS_EMPTY)


class TestXMLBuilder:
    """Test the fluent builder wrapper."""

    def test_fragment_factory_starts_empty(self) -> None:
        builder = XMLBuilder.fragment()

        assert builder.outcome == Ok(Fragment(""))
        assert builder.end() == Err(BuilderError.EMPTY_DOCUMENT)

    def test_default_constructor_matches_fragment(self) -> None:
        assert XMLBuilder().outcome == XMLBuilder.fragment().outcome

    def test_document_factory_default_declaration(self) -> None:
        builder = XMLBuilder.document()

        assert builder.end() == Ok('<?xml version="1.0" encoding="UTF-8"?>\n')

    def test_document_factory_custom_declaration(self) -> None:
        config = BuilderConfig(
            declaration=DeclarationConfig(version="1.1", encoding="ISO-8859-1")
        )

        builder = XMLBuilder.document(config)

        assert builder.end() == Ok(
            '<?xml version="1.1" encoding="ISO-8859-1"?>\n'
        )
        assert builder.config is config

    def test_chained_methods_match_pure_operations(self) -> None:
        options = [Option("id", "1")]
        email = XMLBuilder.fragment().tag("email", "e@x.com")

        builder = (
            XMLBuilder.fragment()
            .tag("name", "Ada")
            .cdata_tag("bio", "<b>bold</b>")
            .option_content_tag("price", "19.99", [Option("currency", "USD")])
            .option_tag("link", [Option("href", "/")])
            .block_tag("owner", email)
            .option_block_tag("admin", email, options)
            .comment("note")
            .block_comment(email)
        )

        assert builder.end() == Ok(
            "<!--\n<email>e@x.com</email>\n-->\n"
            "<!-- note --> \n"
            '<admin id="1">\n<email>e@x.com</email>\n</admin>\n'
            "<owner>\n<email>e@x.com</email>\n</owner>\n"
            '<link href="/"/>\n'
            '<price currency="USD">19.99</price>\n'
            "<bio>\n<![CDATA[\n \t<b>bold</b>\n]]>\n</bio>\n"
            "<name>Ada</name>\n"
        )

    def test_block_methods_accept_raw_outcomes(self) -> None:
        builder = XMLBuilder.fragment().block_tag("owner", tag(new(), "email", "e@x.com"))

        assert builder.end() == Ok("<owner>\n<email>e@x.com</email>\n</owner>\n")

    def test_builders_are_immutable(self) -> None:
        base = XMLBuilder.fragment().tag("a", "1")

        base.tag("b", "2")

        assert base.end() == Ok("<a>1</a>\n")

    def test_errors_propagate_through_builder(self) -> None:
        builder = XMLBuilder.fragment().tag("", "x").tag("b", "2")

        assert builder.is_err()
        assert builder.end() == Err(BuilderError.LABEL_EMPTY)
        assert "LABEL_EMPTY" in repr(builder)

    def test_failed_inner_builder(self) -> None:
        broken = XMLBuilder.fragment().tag("", "x")

        assert XMLBuilder.fragment().block_tag("owner", broken).end() == Err(
            BuilderError.INNER_EMPTY
        )


class TestXMLBuilderLogging:
    """Test optional per-step logging."""

    LOGGER = "xml_chain_builder.api.pipeline"

    def test_logging_disabled_by_default(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger=self.LOGGER):
            XMLBuilder.fragment().tag("a", "1").tag("", "x").end()

        assert caplog.records == []

    def test_steps_logged_when_enabled(self, caplog) -> None:
        config = BuilderConfig.verbose(correlation_id="build-7")

        with caplog.at_level(logging.DEBUG, logger=self.LOGGER):
            XMLBuilder.fragment(config).tag("a", "1").comment("")

        assert len(caplog.records) == 2
        applied, failed = caplog.records
        assert applied.levelno == logging.DEBUG
        assert applied.operation == "tag"
        assert applied.success is True
        assert applied.fragment_length == len("<a>1</a>\n")
        assert applied.correlation_id == "build-7"
        assert applied.component == "xml_builder"
        assert failed.operation == "comment"
        assert failed.success is False
        assert failed.error == "CONTENTS_EMPTY"

    def test_configured_level_is_used(self, caplog) -> None:
        config = BuilderConfig().override(
            logging__enable_operation_logging=True,
            logging__logging_level="INFO",
        )

        with caplog.at_level(logging.INFO, logger=self.LOGGER):
            XMLBuilder.fragment(config).tag("a", "1")

        assert [record.levelno for record in caplog.records] == [logging.INFO]

    def test_finalization_failure_logged_as_warning(self, caplog) -> None:
        config = BuilderConfig.verbose()

        with caplog.at_level(logging.DEBUG, logger=self.LOGGER):
            result = XMLBuilder.fragment(config).end()

        assert result == Err(BuilderError.EMPTY_DOCUMENT)
        warning = caplog.records[-1]
        assert warning.levelno == logging.WARNING
        assert warning.error == "EMPTY_DOCUMENT"

    def test_correlation_tracking_can_be_disabled(self, caplog) -> None:
        config = BuilderConfig.verbose(correlation_id="hidden").override(
            logging__enable_correlation_tracking=False
        )

        with caplog.at_level(logging.DEBUG, logger=self.LOGGER):
            XMLBuilder.fragment(config).tag("a", "1")

        assert caplog.records[0].correlation_id is None

    @pytest.mark.parametrize("enabled", [True, False])
    def test_logging_never_changes_results(self, enabled: bool) -> None:
        config = BuilderConfig().override(logging__enable_operation_logging=enabled)

        builder = XMLBuilder.fragment(config).tag("a", "1").tag("b", "2")

        assert builder.end() == Ok("<b>2</b>\n<a>1</a>\n")

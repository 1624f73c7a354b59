"""Tests for the external-capability adapters (research, selection, embeddings, scraping)."""

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import anthropic
import httpx
import openai
import pytest

from conftest import message, text_block
from fsc_classifier.ai.embeddings import OpenAIEmbedder
from fsc_classifier.ai.research import AnthropicResearcher, ScrapeResearcher, parse_research_output
from fsc_classifier.ai.scrape import html_to_text, normalize_url, scrape_page_text
from fsc_classifier.ai.select_codes import AnthropicSelector, parse_selection_output
from fsc_classifier.config import Settings
from fsc_classifier.errors import ConfigurationError, InputValidationError, SchemaError, TransportError
from fsc_classifier.schemas.contracts import Category, ClassificationRequest

ANTHROPIC_URL = "https://api.anthropic.com/v1/messages"


def anthropic_status_error(status: int) -> anthropic.APIStatusError:
    response = httpx.Response(status, request=httpx.Request("POST", ANTHROPIC_URL), text="overloaded")
    return anthropic.APIStatusError("error", response=response, body=None)


class TestResearchParsing:
    def test_plain_json(self) -> None:
        assert parse_research_output('{"company_description": "Makes glue."}') == "Makes glue."

    def test_json_inside_prose(self) -> None:
        raw = 'Here is the result:\n```json\n{"company_description": "Makes glue."}\n```'

        assert parse_research_output(raw) == "Makes glue."

    @pytest.mark.parametrize("raw", ["", "no json here", '{"description": "x"}', '{"company_description": ""}'])
    def test_malformed_is_schema_error(self, raw: str) -> None:
        with pytest.raises(SchemaError):
            parse_research_output(raw)


class TestAnthropicResearcher:
    async def test_uses_text_after_last_tool_block(self, mock_anthropic: MagicMock, settings: Settings) -> None:
        mock_anthropic.messages.create.return_value = message(
            text_block("I'll look at their website."),
            SimpleNamespace(type="server_tool_use"),
            SimpleNamespace(type="web_search_tool_result"),
            text_block('{"company_description": "Acme makes '),
            text_block('industrial glue."}'),
        )
        researcher = AnthropicResearcher(mock_anthropic, settings)

        description = await researcher.research(ClassificationRequest(company_name="Acme"))

        assert description == "Acme makes industrial glue."

    async def test_request_shape(self, mock_anthropic: MagicMock, settings: Settings) -> None:
        mock_anthropic.messages.create.return_value = message(text_block('{"company_description": "x"}'))
        fetch_page = AsyncMock(return_value="Home page: we make glue")
        researcher = AnthropicResearcher(mock_anthropic, settings, fetch_page=fetch_page)

        await researcher.research(ClassificationRequest(
            company_name="Acme",
            website_url="acme.example",
            attachment_refs=("file_1",),
        ))

        fetch_page.assert_awaited_once_with("acme.example")
        kwargs = mock_anthropic.messages.create.await_args.kwargs
        assert kwargs["tools"][0]["name"] == "web_search"
        content = kwargs["messages"][0]["content"]
        assert "Home page: we make glue" in content[0]["text"]
        assert content[1] == {"type": "document", "source": {"type": "file", "file_id": "file_1"}}
        assert kwargs["extra_headers"]["anthropic-beta"].startswith("files-api")

    async def test_prefetch_failure_is_not_fatal(self, mock_anthropic: MagicMock, settings: Settings) -> None:
        mock_anthropic.messages.create.return_value = message(text_block('{"company_description": "x"}'))
        fetch_page = AsyncMock(side_effect=TransportError("timeout"))
        researcher = AnthropicResearcher(mock_anthropic, settings, fetch_page=fetch_page)

        assert await researcher.research(ClassificationRequest(company_name="Acme", email_domain="acme.example")) == "x"

    async def test_status_error_is_transport_error(self, mock_anthropic: MagicMock, settings: Settings) -> None:
        mock_anthropic.messages.create.side_effect = anthropic_status_error(529)
        researcher = AnthropicResearcher(mock_anthropic, settings)

        with pytest.raises(TransportError) as exc_info:
            await researcher.research(ClassificationRequest(company_name="Acme"))

        assert exc_info.value.status == 529
        assert exc_info.value.body == "overloaded"

    async def test_connection_error_is_transport_error(self, mock_anthropic: MagicMock, settings: Settings) -> None:
        mock_anthropic.messages.create.side_effect = anthropic.APIConnectionError(
            request=httpx.Request("POST", ANTHROPIC_URL)
        )
        researcher = AnthropicResearcher(mock_anthropic, settings)

        with pytest.raises(TransportError):
            await researcher.research(ClassificationRequest(company_name="Acme"))


class TestScrapeResearcher:
    async def test_name_only_without_website(self, settings: Settings) -> None:
        fetch_page = AsyncMock()

        text = await ScrapeResearcher(settings, fetch_page=fetch_page).research(
            ClassificationRequest(company_name="Acme")
        )

        assert text == "Acme"
        fetch_page.assert_not_awaited()

    async def test_email_domain_used_as_website(self, settings: Settings) -> None:
        fetch_page = AsyncMock(return_value="We sell glue")

        text = await ScrapeResearcher(settings, fetch_page=fetch_page).research(
            ClassificationRequest(company_name="Acme", email_domain="@acme.example")
        )

        fetch_page.assert_awaited_once_with("acme.example")
        assert text == "Acme\nWe sell glue"

    @pytest.mark.parametrize("fields", [{"website_url": "   "}, {"email_domain": " "}, {"email_domain": "@"}])
    async def test_blank_site_fields_skip_fetch(self, settings: Settings, fields: dict) -> None:
        fetch_page = AsyncMock()
        request = ClassificationRequest(company_name="Acme", **fields)

        text = await ScrapeResearcher(settings, fetch_page=fetch_page).research(request)

        assert text == "Acme"
        fetch_page.assert_not_awaited()

    def test_blank_site_fields_normalized_to_none(self) -> None:
        request = ClassificationRequest(company_name="Acme", website_url="  ", email_domain=" acme.example ")

        assert request.website_url is None
        assert request.email_domain == "acme.example"


class TestAnthropicSelector:
    @pytest.fixture
    def candidates(self) -> list[Category]:
        return [Category(code="5610", title="Adhesives"), Category(code="8115", title="Boxes, Cartons, and Crates")]

    async def test_parses_picks(
        self, mock_anthropic: MagicMock, settings: Settings, candidates: list[Category]
    ) -> None:
        payload = {"fsc_codes": [{"code": "5610", "title": "Adhesives", "reason": "Glue maker"}]}
        mock_anthropic.messages.create.return_value = message(text_block(json.dumps(payload)))

        picks = await AnthropicSelector(mock_anthropic, settings).select("Makes glue.", candidates)

        assert [(p.code, p.reason) for p in picks] == [("5610", "Glue maker")]
        kwargs = mock_anthropic.messages.create.await_args.kwargs
        assert kwargs["output_config"]["format"]["type"] == "json_schema"
        prompt = kwargs["messages"][0]["content"]
        assert "5610 - Adhesives" in prompt
        assert "8115 - Boxes, Cartons, and Crates" in prompt

    async def test_empty_content_is_schema_error(
        self, mock_anthropic: MagicMock, settings: Settings, candidates: list[Category]
    ) -> None:
        mock_anthropic.messages.create.return_value = message()

        with pytest.raises(SchemaError):
            await AnthropicSelector(mock_anthropic, settings).select("Makes glue.", candidates)

    @pytest.mark.parametrize("raw", ["", "   ", "not json", '{"codes": []}', '{"fsc_codes": [{"code": "5610"}]}'])
    def test_malformed_is_schema_error(self, raw: str) -> None:
        with pytest.raises(SchemaError):
            parse_selection_output(raw)


class TestOpenAIEmbedder:
    def test_requires_api_key(self, settings: Settings) -> None:
        with pytest.raises(ConfigurationError):
            OpenAIEmbedder(settings)

    async def test_truncates_and_orders(self) -> None:
        settings = Settings(embedding_max_chars=5, embedding_dimensions=3)
        client = MagicMock()
        client.embeddings.create = AsyncMock(return_value=SimpleNamespace(data=[
            SimpleNamespace(index=1, embedding=[0.0, 1.0, 0.0]),
            SimpleNamespace(index=0, embedding=[1.0, 0.0, 0.0]),
        ]))

        vectors = await OpenAIEmbedder(settings, client=client).embed_many(["abcdefgh", "xy"])

        assert vectors == [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]]
        kwargs = client.embeddings.create.await_args.kwargs
        assert kwargs["input"] == ["abcde", "xy"]
        assert kwargs["dimensions"] == 3

    async def test_missing_vectors_is_schema_error(self, settings: Settings) -> None:
        client = MagicMock()
        client.embeddings.create = AsyncMock(return_value=SimpleNamespace(data=[]))

        with pytest.raises(SchemaError):
            await OpenAIEmbedder(settings, client=client).embed("text")

    async def test_connection_error_is_transport_error(self, settings: Settings) -> None:
        client = MagicMock()
        client.embeddings.create = AsyncMock(
            side_effect=openai.APIConnectionError(request=httpx.Request("POST", "https://api.openai.com/v1/embeddings"))
        )

        with pytest.raises(TransportError):
            await OpenAIEmbedder(settings, client=client).embed("text")


class TestScrape:
    def test_html_to_text_strips_scripts(self) -> None:
        html = (
            "<html><head><style>p{}</style></head><body>"
            "<h1>Acme</h1><script>var x = 1;</script><noscript>enable js</noscript>"
            "<p>We make   glue.</p></body></html>"
        )

        assert html_to_text(html) == "Acme We make glue."

    def test_normalize_url(self) -> None:
        assert normalize_url(" acme.example ") == "https://acme.example"
        assert normalize_url("http://acme.example") == "http://acme.example"

    @pytest.mark.parametrize("url", ["", "ftp://acme.example", "javascript://x"])
    def test_normalize_url_rejects(self, url: str) -> None:
        with pytest.raises(InputValidationError):
            normalize_url(url)

    async def test_scrape_page_text(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.host == "acme.example"
            return httpx.Response(200, text="<body><p>Glue and sealant</p></body>")

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            text = await scrape_page_text("acme.example", client=client)

        assert text == "Glue and sealant"

    async def test_http_error_is_transport_error(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(404, text="not found"))

        async with httpx.AsyncClient(transport=transport) as client:
            with pytest.raises(TransportError) as exc_info:
                await scrape_page_text("https://acme.example/missing", client=client)

        assert exc_info.value.status == 404

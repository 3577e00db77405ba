"""Tests for relaxed link detection."""

from core.links import DEFAULT_DETECTOR, LinkDetector


class TestLinkDetector:
    def test_finds_url_with_scheme(self):
        text = "see https://example.com/a/very/long/path/indeed for more"
        assert DEFAULT_DETECTOR.find_spans(text) == [(4, 47)]

    def test_finds_bare_domain(self):
        assert DEFAULT_DETECTOR.find_links("visit example.com today") == ["example.com"]

    def test_finds_country_code_domain(self):
        assert DEFAULT_DETECTOR.find_links("news at bbc.co.uk/news ok") == ["bbc.co.uk/news"]

    def test_excludes_trailing_punctuation(self):
        assert DEFAULT_DETECTOR.find_links("Go to example.org/path.") == ["example.org/path"]
        assert DEFAULT_DETECTOR.find_links("(see https://example.net)") == ["https://example.net"]

    def test_scheme_with_localhost_and_port(self):
        links = DEFAULT_DETECTOR.find_links("health at http://localhost:8080/health now")
        assert links == ["http://localhost:8080/health"]

    def test_query_and_fragment(self):
        links = DEFAULT_DETECTOR.find_links("https://example.com/search?q=thread#top")
        assert links == ["https://example.com/search?q=thread#top"]

    def test_ignores_versions_and_abbreviations(self):
        assert DEFAULT_DETECTOR.find_spans("OrthoFisher v1.1.2 is out, e.g. today") == []

    def test_ignores_email_addresses(self):
        assert DEFAULT_DETECTOR.find_spans("mail me@example.com please") == []

    def test_multiple_links_are_ordered_and_disjoint(self):
        text = "a.com and https://b.io/x and c.dev"
        spans = DEFAULT_DETECTOR.find_spans(text)
        assert [text[s:e] for s, e in spans] == ["a.com", "https://b.io/x", "c.dev"]
        for (_, prev_end), (start, _) in zip(spans, spans[1:]):
            assert prev_end <= start

    def test_empty_and_plain_text(self):
        assert DEFAULT_DETECTOR.find_spans("") == []
        assert DEFAULT_DETECTOR.find_spans("no links in here at all") == []

    def test_custom_tlds(self):
        detector = LinkDetector(tlds=("example",))
        assert detector.find_links("try foo.example and foo.com") == ["foo.example"]

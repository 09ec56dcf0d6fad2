import unittest

from textscrub.pipeline import clean_text


class CleanTextTests(unittest.TestCase):
    def test_replaces_zero_width_characters(self) -> None:
        result = clean_text("Hello\u200BWorld\u200C\u200DTest")
        self.assertEqual(result.cleaned, "Hello World  Test")
        self.assertEqual(len(result.changes), 3)
        self.assertTrue(all(c.category == "whitespace" for c in result.changes))

    def test_converts_smart_quotes_counting_apostrophe_once(self) -> None:
        result = clean_text("\u201CHello\u201D and \u2018world\u2019")
        self.assertEqual(result.cleaned, "\"Hello\" and 'world'")
        self.assertEqual(len(result.changes), 4)
        self.assertTrue(all(c.category == "smart-quotes" for c in result.changes))

    def test_expands_em_dashes(self) -> None:
        result = clean_text("Hello\u2014world and test\u2014more")
        self.assertEqual(result.cleaned, "Hello - world and test - more")
        self.assertEqual([c.category for c in result.changes], ["em-dash", "em-dash"])

    def test_converts_en_dash(self) -> None:
        result = clean_text("pages 4\u20139")
        self.assertEqual(result.cleaned, "pages 4-9")
        self.assertEqual(result.changes[0].category, "en-dash")

    def test_converts_ellipsis(self) -> None:
        result = clean_text("Hello\u2026world")
        self.assertEqual(result.cleaned, "Hello...world")
        self.assertEqual(result.changes[0].category, "ellipsis")

    def test_removes_soft_hyphen(self) -> None:
        result = clean_text("Hel\u00ADlo world")
        self.assertEqual(result.cleaned, "Hello world")
        self.assertEqual(result.changes[0].category, "soft-hyphen")
        self.assertEqual(result.changes[0].replacement, "")

    def test_converts_fullwidth_characters(self) -> None:
        result = clean_text("\uFF28\uFF45\uFF4C\uFF4C\uFF4F\uFF11\uFF12\uFF13")
        self.assertEqual(result.cleaned, "Hello123")
        self.assertEqual(len(result.changes), 8)
        self.assertEqual([c.start for c in result.changes], list(range(8)))
        self.assertTrue(all(c.category == "fullwidth" for c in result.changes))

    def test_removes_url_tracking_parameters(self) -> None:
        text = "Check this: https://example.com/page?source=chatgpt&utm_source=openai&other=keep"
        result = clean_text(text)
        self.assertEqual(result.cleaned, "Check this: https://example.com/page?other=keep")
        self.assertEqual(len(result.changes), 1)
        change = result.changes[0]
        self.assertEqual(change.category, "url-params")
        self.assertEqual(change.start, 12)
        self.assertEqual(change.original, text[12:])

    def test_url_without_path_gains_slash(self) -> None:
        result = clean_text("Visit https://test.com?ref=bard&source=gemini&keep=this")
        self.assertEqual(result.cleaned, "Visit https://test.com/?keep=this")
        self.assertEqual(len(result.changes), 1)

    def test_url_without_tracking_is_untouched(self) -> None:
        result = clean_text("visit https://a.com?keep=1")
        self.assertEqual(result.cleaned, "visit https://a.com?keep=1")
        self.assertEqual(result.changes, [])

    def test_url_inside_smart_quotes(self) -> None:
        result = clean_text("See \u201Chttps://a.com/?utm_source=chatgpt\u201D")
        self.assertEqual(result.cleaned, 'See "https://a.com/"')
        self.assertEqual(
            [c.category for c in result.changes],
            ["smart-quotes", "url-params", "smart-quotes"],
        )

    def test_tracking_after_curly_apostrophe_in_query(self) -> None:
        text = "see https://a.com/?q=\u2019x&source=chatgpt end"
        result = clean_text(text)
        self.assertEqual(result.cleaned, "see https://a.com/?q='x end")
        self.assertEqual([c.category for c in result.changes], ["url-params"])
        self.assertEqual(result.changes[0].original, "https://a.com/?q=\u2019x&source=chatgpt")

    def test_url_followed_by_closing_quote_and_period(self) -> None:
        result = clean_text("\u201CRead https://a.com/?utm_source=chatgpt.com\u201D.")
        self.assertEqual(result.cleaned, '"Read https://a.com/".')

    def test_empty_text(self) -> None:
        result = clean_text("")
        self.assertEqual(result.cleaned, "")
        self.assertEqual(result.changes, [])

    def test_clean_text_is_unchanged(self) -> None:
        text = "This is clean text with no issues."
        result = clean_text(text)
        self.assertEqual(result.cleaned, text)
        self.assertEqual(result.changes, [])
        self.assertEqual(result.original, text)

    def test_mixed_issues(self) -> None:
        text = "\u201CSmart quotes\u201D with\u2014em dash and\u200Bzero-width space"
        result = clean_text(text)
        self.assertEqual(result.cleaned, '"Smart quotes" with - em dash and zero-width space')
        starts = [c.start for c in result.changes]
        self.assertEqual(starts, sorted(starts))

    def test_trailing_newlines_trimmed_last(self) -> None:
        result = clean_text("Hi\u2014\n\r\n")
        self.assertEqual(result.cleaned, "Hi - ")
        trailing = result.changes[-1]
        self.assertEqual(trailing.category, "whitespace")
        self.assertEqual(trailing.original, "\n\r\n")
        self.assertEqual((trailing.start, trailing.end), (5, 8))

    def test_inner_newlines_are_kept(self) -> None:
        result = clean_text("one\n\ntwo")
        self.assertEqual(result.cleaned, "one\n\ntwo")
        self.assertEqual(result.changes, [])

    def test_every_suspicious_whitespace_becomes_a_space(self) -> None:
        chars = "\u00A0\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200A"
        chars += "\u200B\u200C\u200D\u202F\u205F\u3000\uFEFF"
        text = "x".join(chars)
        result = clean_text(text)
        self.assertEqual(len(result.changes), len(chars))
        self.assertEqual(result.cleaned, "x".join(" " * len(chars)))

    def test_length_accounting(self) -> None:
        text = "A\u2014b\u2026c\u00ADd\uFF21 https://x.io/?ref=claude&k=v\u200B"
        result = clean_text(text)
        expected = len(text)
        for change in result.changes:
            expected += len(change.replacement) - len(change.original)
        self.assertEqual(len(result.cleaned), expected)

    def test_idempotent_on_cleaned_output(self) -> None:
        text = "\u201CQuote\u201D \u2014 https://a.com/x?utm_source=chatgpt.com \uFF41\u2026\n"
        first = clean_text(text)
        second = clean_text(first.cleaned)
        self.assertEqual(second.changes, [])
        self.assertEqual(second.cleaned, first.cleaned)

    def test_repeated_calls_are_equal(self) -> None:
        text = "It\u2019s \u2013 fine\u00A0"
        self.assertEqual(clean_text(text), clean_text(text))


if __name__ == "__main__":
    unittest.main()

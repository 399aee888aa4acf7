import unittest

from text_summary.segmentation import iter_words, split_sentences


def sentences(text):
    return [text[start:end] for start, end in split_sentences(text)]


class TestSplitSentences(unittest.TestCase):
    def test_empty_text_has_no_sentences(self):
        self.assertEqual(split_sentences(""), [])

    def test_trailing_space_stays_with_sentence(self):
        self.assertEqual(
            sentences("See Spot. See Spot run. Run Spot, run!"),
            ["See Spot. ", "See Spot run. ", "Run Spot, run!"],
        )

    def test_spans_cover_text_in_order(self):
        text = "First one. Second one?  Third one!\nFourth"
        spans = split_sentences(text)
        self.assertEqual(spans[0][0], 0)
        self.assertEqual(spans[-1][1], len(text))
        for (_, end), (start, _) in zip(spans, spans[1:]):
            self.assertEqual(end, start)
        self.assertTrue(all(end > start for start, end in spans))
        self.assertEqual("".join(sentences(text)), text)

    def test_decimal_point_is_not_a_boundary(self):
        self.assertEqual(
            sentences("The price is 3.5 dollars. Buy now."),
            ["The price is 3.5 dollars. ", "Buy now."],
        )

    def test_lowercase_continuation_after_abbreviation(self):
        self.assertEqual(sentences("Meet me at 5 p.m. tomorrow."), ["Meet me at 5 p.m. tomorrow."])

    def test_closing_quote_belongs_to_sentence(self):
        self.assertEqual(
            sentences('He said "Stop." Then he left.'),
            ['He said "Stop." ', "Then he left."],
        )

    def test_repeated_terminators(self):
        self.assertEqual(sentences("Really?! Yes."), ["Really?! ", "Yes."])

    def test_paragraph_separators_break(self):
        self.assertEqual(sentences("Title\nBody text."), ["Title\n", "Body text."])
        self.assertEqual(sentences("One\r\nTwo"), ["One\r\n", "Two"])

    def test_ideographic_full_stop(self):
        self.assertEqual(sentences("你好。再见。"), ["你好。", "再见。"])

    def test_blank_lines_are_skipped(self):
        text = "Cats purr softly.\n\nDogs bark loudly.\n\nBirds sing sweetly."
        self.assertEqual(
            sentences(text),
            ["Cats purr softly.\n", "Dogs bark loudly.\n", "Birds sing sweetly."],
        )
        self.assertEqual(split_sentences(text)[1], (19, 37))

    def test_punctuation_only_segments_are_skipped(self):
        self.assertEqual(sentences("Stop.\n...\nGo home."), ["Stop.\n", "Go home."])

    def test_whitespace_only_text_has_no_sentences(self):
        self.assertEqual(split_sentences("   \n"), [])
        self.assertEqual(split_sentences("\r\n\r\n"), [])

    def test_sentences_without_separators(self):
        self.assertEqual(sentences("Hi!Yo!Ok!No"), ["Hi!", "Yo!", "Ok!", "No"])


class TestIterWords(unittest.TestCase):
    def test_drops_punctuation_and_spaces(self):
        self.assertEqual(list(iter_words("Run Spot, run!")), ["Run", "Spot", "run"])

    def test_numbers_and_accents(self):
        self.assertEqual(list(iter_words("Hello, world! 42 times.")), ["Hello", "world", "42", "times"])
        self.assertEqual(list(iter_words("Café crème")), ["Café", "crème"])

    def test_no_words(self):
        self.assertEqual(list(iter_words(" ... !? ")), [])


if __name__ == "__main__":
    unittest.main()

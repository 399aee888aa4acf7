import unittest

from main import select, selection_shares
from text_summary import Summarizer

SPOT = "See Spot. See Spot run. Run Spot, run!"


class TestSelectionShares(unittest.TestCase):
    def setUp(self):
        self.ranking = Summarizer.language_agnostic().rank(SPOT)

    def test_byte_ratio_differs_from_sentence_share(self):
        # "See Spot run. " is 14 of the 38 bytes
        sentence_share, byte_ratio = selection_shares(self.ranking, [1], SPOT)
        self.assertAlmostEqual(sentence_share, 1 / 3)
        self.assertAlmostEqual(byte_ratio, 14 / 38)

    def test_everything_selected(self):
        selected = select(self.ranking, SPOT, "ratio", 1.0)
        self.assertEqual(selection_shares(self.ranking, selected, SPOT), (1.0, 1.0))


if __name__ == "__main__":
    unittest.main()

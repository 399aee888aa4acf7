import math
import unittest

from text_summary.datatypes import Document
from text_summary.preprocessing import preprocess_text
from text_summary.scoring import rank_by_similarity, rank_sentences, select_core

SPOT = "See Spot. See Spot run. Run Spot, run!"


class TestCoreSelection(unittest.TestCase):
    def test_lowest_index_wins_ties(self):
        self.assertEqual(select_core([0.5, 0.9, 0.9]), 1)
        self.assertEqual(select_core([0.0, 0.0]), 0)

    def test_nan_counts_as_zero(self):
        self.assertEqual(select_core([math.nan, 0.1]), 1)
        self.assertEqual(select_core([math.nan, 0.0]), 0)


class TestRankBySimilarity(unittest.TestCase):
    def test_descending_with_ties_in_document_order(self):
        self.assertEqual(rank_by_similarity([0.2, 0.9, 0.2, math.nan]), [1, 0, 2, 3])

    def test_is_a_permutation(self):
        sims = [0.3, 0.1, 0.7, 0.7, 0.0]
        order = rank_by_similarity(sims)
        self.assertEqual(sorted(order), list(range(len(sims))))


class TestRankSentences(unittest.TestCase):
    def test_empty_document_rejected(self):
        with self.assertRaises(ValueError):
            rank_sentences(Document(raw_text="", sentences=[]))

    def test_spot(self):
        ranking = rank_sentences(preprocess_text(SPOT))
        # "See Spot run." shares a term with both other sentences
        self.assertEqual(ranking.core, 1)
        self.assertEqual(ranking.order, [1, 0, 2])
        self.assertAlmostEqual(ranking.core_similarity[1], 1.0)
        self.assertAlmostEqual(ranking.core_similarity[0], 1 / math.sqrt(2))
        self.assertAlmostEqual(ranking.core_similarity[2], 1 / math.sqrt(2))
        self.assertEqual(ranking.idf["spot"], 0.0)
        self.assertEqual(len(ranking.sentences), 3)
        self.assertEqual(max(ranking.document_similarity), ranking.document_similarity[1])

    def test_single_sentence_has_zero_vectors(self):
        ranking = rank_sentences(preprocess_text("Just one sentence."))
        self.assertEqual(ranking.document_vector, {})
        self.assertEqual(ranking.core, 0)
        self.assertEqual(ranking.order, [0])
        self.assertEqual(ranking.core_similarity, [0])


if __name__ == "__main__":
    unittest.main()

import unittest
from packlist.logic.duplicates.similarity import group_similar_items


def _item(id, name):
    return {"id": id, "name": name}


class TestGroupSimilarItems(unittest.TestCase):

    def test_pairs_case_variants_and_drops_singletons(self):
        items = [_item("1", "T-shirt"), _item("2", "T-Shirt"), _item("3", "Sunscreen")]
        groups = group_similar_items(items, 0.7)
        self.assertEqual([[i["id"] for i in g] for g in groups], [["1", "2"]])

    def test_empty_and_single(self):
        self.assertEqual(group_similar_items([]), [])
        self.assertEqual(group_similar_items([_item("1", "Tent")]), [])

    def test_several_groups_in_seed_order(self):
        items = [
            _item("1", "Phone charger"),
            _item("2", "Toothbrush"),
            _item("3", "Phone chargers"),
            _item("4", "Tooth brush"),
        ]
        groups = group_similar_items(items)
        self.assertEqual([[i["id"] for i in g] for g in groups], [["1", "3"], ["2", "4"]])

    def test_members_compared_to_seed_only(self):
        # "tints" is close to "tents" (0.8) but not to the seed "tent" (0.6)
        items = [_item("1", "Tent"), _item("2", "Tents"), _item("3", "Tints")]
        groups = group_similar_items(items, 0.7)
        self.assertEqual([[i["id"] for i in g] for g in groups], [["1", "2"]])

    def test_threshold_one_groups_only_normalized_equal_names(self):
        items = [_item("1", "Socks"), _item("2", "Sock"), _item("3", "socks!")]
        groups = group_similar_items(items, 1.0)
        self.assertEqual([[i["id"] for i in g] for g in groups], [["1", "3"]])

    def test_threshold_zero_groups_everything(self):
        items = [_item("1", "Tent"), _item("2", "Passport"), _item("3", "Sunscreen")]
        groups = group_similar_items(items, 0.0)
        self.assertEqual(len(groups), 1)
        self.assertEqual(len(groups[0]), 3)

    def test_invalid_threshold(self):
        for bad in (-0.1, 1.5):
            with self.subTest(threshold=bad):
                with self.assertRaises(ValueError):
                    group_similar_items([_item("1", "Tent")], bad)

    def test_does_not_mutate_input(self):
        items = [_item("1", "Map"), _item("2", "Maps")]
        snapshot = [dict(i) for i in items]
        groups = group_similar_items(items, 0.7)
        self.assertEqual(items, snapshot)
        self.assertIs(groups[0][0], items[0])

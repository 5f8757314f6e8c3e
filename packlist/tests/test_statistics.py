import unittest
from packlist.domain.Category import Category
from packlist.domain.Item import Item
from packlist.domain.PackingList import PackingList
from packlist.logic.reporting.statistics import compute_list_statistics


class TestListStatistics(unittest.TestCase):

    def test_counts(self):
        pl = PackingList("Beach")
        c1 = pl.add_category(Category("Clothes"))
        c2 = pl.add_category(Category("Toiletries"))
        pl.add_item(c1.id, Item("Swimsuit", priority="essential", packed=True))
        pl.add_item(c1.id, Item("Hat", priority="low"))
        pl.add_item(c2.id, Item("Sunscreen", priority="essential"))

        stats = compute_list_statistics(pl)
        self.assertEqual(stats['total_items'], 3)
        self.assertEqual(stats['packed_items'], 1)
        self.assertEqual(stats['completion_percentage'], 33)
        self.assertEqual(stats['items_by_priority'], {'low': 1, 'medium': 0, 'high': 0, 'essential': 2})
        self.assertEqual(stats['items_by_category'][c1.id], {'name': 'Clothes', 'total': 2, 'packed': 1})
        self.assertEqual(stats['items_by_category'][c2.id], {'name': 'Toiletries', 'total': 1, 'packed': 0})

    def test_empty_list(self):
        stats = compute_list_statistics(PackingList("Nothing"))
        self.assertEqual(stats['total_items'], 0)
        self.assertEqual(stats['completion_percentage'], 0)

    def test_half_percent_rounds_up(self):
        pl = PackingList("Eight")
        cat = pl.add_category(Category("All"))
        for i in range(8):
            pl.add_item(cat.id, Item(f"Item {i}", packed=(i == 0)))
        self.assertEqual(compute_list_statistics(pl)['completion_percentage'], 13)

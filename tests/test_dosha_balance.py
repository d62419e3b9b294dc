# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from ayurwell.analytics.balance import (
    DoshaBalance,
    FoodItem,
    calculate_dosha_balance,
    dominant_dosha,
    suggest_for_balance,
    suggestions_for,
)
from ayurwell.prakriti.tables import Dosha, DoshaVector


class TestDoshaBalance(unittest.TestCase):
    def test_balance_uses_absolute_total(self) -> None:
        foods = [
            FoodItem("Spicy curry", DoshaVector(vata=0, pitta=3, kapha=-1)),
            FoodItem("Rice", DoshaVector(vata=-1, pitta=-1, kapha=1)),
            FoodItem("Water"),
        ]
        # acc = (-1, 2, 0), |total| = 3
        balance = calculate_dosha_balance(foods)
        self.assertEqual(balance, DoshaBalance(vata=-33, pitta=67, kapha=0))
        self.assertEqual(dominant_dosha(balance), Dosha.PITTA)

    def test_empty_log_is_all_zero(self) -> None:
        self.assertEqual(calculate_dosha_balance([]), DoshaBalance())
        self.assertEqual(calculate_dosha_balance([FoodItem("Tea")]), DoshaBalance())
        self.assertIsNone(dominant_dosha(DoshaBalance()))

    def test_all_negative_has_no_dominant(self) -> None:
        balance = calculate_dosha_balance([FoodItem("Cucumber", DoshaVector(vata=-1, pitta=-2, kapha=-1))])
        self.assertEqual(balance, DoshaBalance(vata=-25, pitta=-50, kapha=-25))
        self.assertIsNone(dominant_dosha(balance))


class TestDietarySuggestions(unittest.TestCase):
    def test_suggestions_above_threshold(self) -> None:
        balance = DoshaBalance(vata=28, pitta=52, kapha=20)
        items = suggest_for_balance(balance, threshold=40)
        self.assertTrue(items)
        self.assertTrue(all(s.dosha == Dosha.PITTA for s in items))
        self.assertEqual(items[0].priority, "high")
        self.assertEqual(items[0].title, "Increase Cooling Foods")

    def test_no_suggestions_below_threshold(self) -> None:
        balance = DoshaBalance(vata=34, pitta=33, kapha=33)
        self.assertEqual(suggest_for_balance(balance, threshold=40), [])

    def test_priority_filter(self) -> None:
        items = suggestions_for(Dosha.KAPHA, priority="high")
        self.assertEqual([s.id for s in items], ["kapha-light-meals"])
        self.assertEqual(suggestions_for(Dosha.VATA, priority="low"), [])


if __name__ == "__main__":
    unittest.main()

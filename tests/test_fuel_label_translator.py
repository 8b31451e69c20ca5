from unittest import TestCase

from nrel.footprint.external.dataset import fuel_label_translator
from nrel.footprint.model.energy.fueltype import FuelType


class TestFuelLabelTranslator(TestCase):
    def test_to_canonical(self):
        self.assertEqual(fuel_label_translator.to_canonical("Essence"), "petrol")
        self.assertEqual(fuel_label_translator.to_canonical("Diesel"), "diesel")
        self.assertEqual(fuel_label_translator.to_canonical("GN"), "cng")
        self.assertEqual(fuel_label_translator.to_canonical("EL"), "electricity")

    def test_to_native(self):
        self.assertEqual(fuel_label_translator.to_native("petrol"), "Essence")
        self.assertEqual(fuel_label_translator.to_native("diesel"), "Diesel")
        self.assertEqual(fuel_label_translator.to_native("cng"), "GN")
        self.assertEqual(fuel_label_translator.to_native("electricity"), "EL")

    def test_every_fuel_type_is_mapped_both_ways(self):
        for fuel_type in FuelType:
            native = fuel_label_translator.to_native(fuel_type.value)
            self.assertNotEqual(native, fuel_type.value, f"{fuel_type} should have a dataset label")
            self.assertEqual(fuel_label_translator.to_canonical(native), fuel_type.value)

    def test_every_dataset_label_is_mapped_both_ways(self):
        for label in ("Essence", "Diesel", "GN", "EL"):
            canonical = fuel_label_translator.to_canonical(label)
            self.assertEqual(fuel_label_translator.to_native(canonical), label)

    def test_unmapped_labels_pass_through(self):
        self.assertEqual(fuel_label_translator.to_canonical("ES/EL"), "ES/EL")
        self.assertEqual(fuel_label_translator.to_native("hydrogen"), "hydrogen")

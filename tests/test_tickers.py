import unittest
from stockcore.resolver.tickers import TickerMap, strip_suffix


class TestTickerMap(unittest.TestCase):
    def setUp(self):
        self.tickers = TickerMap.default()

    def test_exact(self):
        self.assertEqual(self.tickers.symbol_for("Infosys Ltd"), "INFY.NS")

    def test_case_insensitive(self):
        self.assertEqual(self.tickers.symbol_for("  hdfc bank ltd "), "HDFCBANK.NS")

    def test_suffix_stripped(self):
        self.assertEqual(self.tickers.symbol_for("Tata Motors Limited"), "TATAMOTORS.NS")
        self.assertEqual(self.tickers.symbol_for("Wipro"), "WIPRO.NS")
        self.assertEqual(self.tickers.symbol_for("Reliance Industries Ltd."), "RELIANCE.NS")

    def test_generated_fallback(self):
        self.assertEqual(self.tickers.symbol_for("Zen Tech Pvt Ltd"), "ZENTECHPVT.NS")
        self.assertEqual(self.tickers.symbol_for("Foo-Bar & Sons Ltd"), "FOOBARSONS.NS")

    def test_suffix_needs_word_boundary(self):
        self.assertEqual(strip_suffix("Tesco"), "Tesco")
        self.assertEqual(strip_suffix("Acme Corp."), "Acme")
        self.assertEqual(strip_suffix("Acme Corporation"), "Acme")

    def test_read_only(self):
        with self.assertRaises(TypeError):
            self.tickers.symbols["New Co"] = "NEW.NS"

    def test_injected_table(self):
        src = {"Acme Corp": "ACME.BO"}
        t = TickerMap.from_mapping(src, suffix=".BO")
        src["Other"] = "OTHER.BO"
        self.assertNotIn("Other", t.symbols)
        self.assertEqual(t.symbol_for("acme corporation"), "ACME.BO")
        self.assertEqual(t.symbol_for("Widget Inc"), "WIDGET.BO")


if __name__ == "__main__":
    unittest.main()

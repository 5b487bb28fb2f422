import json

import pytest

from purchase_mapping.core import BrandCatalog, MappingError


class TestBundledCatalog:
    """Keyword heuristics are only trusted for the literal keywords shipped."""

    def test_loads_observed_brands(self):
        names = [e.name for e in BrandCatalog.load().entries]
        assert names == ["Apple", "Samsung", "Sony", "Bose", "Sonos", "LG", "Microsoft", "Google", "Huawei", "OnePlus"]

    def test_load_is_shared(self):
        assert BrandCatalog.load() is BrandCatalog.load()

    def test_brand_and_category(self):
        catalog = BrandCatalog.load()
        assert catalog.brand_for("Sonos Play5 Speaker") == "Sonos"
        assert catalog.category_for("sonos one") == "Audio"
        assert catalog.brand_for("Vintage lamp") == "Unknown"
        assert catalog.category_for("Vintage lamp") == "Other"
        assert catalog.brand_for(None) == "Unknown"

    def test_first_match_in_catalog_order(self):
        assert BrandCatalog.load().brand_for("Samsung case for Apple iPhone") == "Apple"


class TestModelExtraction:
    def test_brand_removed_and_first_three_words_kept(self):
        catalog = BrandCatalog.load()
        assert catalog.model_for("Apple AirPods Pro 2nd Generation", "Apple") == "AirPods Pro 2nd"

    def test_short_titles(self):
        catalog = BrandCatalog.load()
        assert catalog.model_for("Sonos Play5 Speaker", "Sonos") == "Play5 Speaker"
        assert catalog.model_for("Sonos", "Sonos") == "Unknown"
        assert catalog.model_for("", "Unknown") == "Unknown"

    def test_unknown_brand_is_not_stripped(self):
        assert BrandCatalog.load().model_for("Unknown Pleasures vinyl LP", "Unknown") == "Unknown Pleasures vinyl"


class TestCustomCatalog:
    def test_from_file(self, tmp_path):
        path = tmp_path / "brands.json"
        path.write_text(json.dumps({
            "default_category": "Misc",
            "brands": [{"name": "Nintendo", "keywords": ["nintendo", "switch"], "category": "Gaming"}],
        }), encoding="utf-8")

        catalog = BrandCatalog.from_file(path)
        assert catalog.brand_for("Switch OLED") == "Nintendo"
        assert catalog.category_for("Switch OLED") == "Gaming"
        assert catalog.category_for("Sonos One") == "Misc"

    def test_category_defaults_to_catalog_default(self):
        catalog = BrandCatalog.from_dict({"brands": [{"name": "Dyson", "keywords": ["dyson"]}]})
        assert catalog.category_for("Dyson V11") == "Other"

    def test_invalid_catalog_raises(self):
        with pytest.raises(MappingError):
            BrandCatalog.from_dict({"brands": [{"name": "", "keywords": []}]})

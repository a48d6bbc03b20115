"""
Tests for DataManager: snapshot collection/restore, dedup and
single-region normalization.
"""

import pytest

from pagestate.manager import DataManager
from pagestate.page import EditablePage
from pagestate.store import MemoryStore
from pagestate.types.record import ListRecord, NumericGaugeRecord, PlainRecord

PAGE = """
<html><body>
  <h1 class="title" contenteditable="true">Jane Doe</h1>
  <p class="about material-wave" contenteditable="true">Builds <b>things</b>.<span class="material-wave-ripple"></span></p>
  <ul class="skills" data-type="list" contenteditable="true"><li>Python</li><li>&lt;b&gt;SQL</li></ul>
  <div class="skills-box">
    <span class="level" data-type="number" contenteditable="true">0.25</span>
  </div>
  <div class="languages">
    <span class="language-box__level" data-type="number" contenteditable="true">fluent</span>
  </div>
  <p>not editable</p>
</body></html>
"""

BLANK_PAGE = """
<html><body>
  <h1 class="title" contenteditable="true"></h1>
  <p class="about" contenteditable="true"></p>
  <ul class="skills" data-type="list" contenteditable="true"></ul>
  <div class="skills-box">
    <span class="level" data-type="number" contenteditable="true"></span>
  </div>
  <div class="languages">
    <span class="language-box__level" data-type="number" contenteditable="true"></span>
  </div>
</body></html>
"""


@pytest.fixture
def manager():
    return DataManager(MemoryStore())


class TestCollectSnapshot:
    def test_keys_and_records(self, manager):
        regions = EditablePage(PAGE).regions()
        snapshot = manager.collect_snapshot(regions)

        assert snapshot == {
            "h1-title-no-id-0": PlainRecord(html="Jane Doe"),
            "p-about-no-id-1": PlainRecord(html="Builds <b>things</b>."),
            "ul-skills-no-id-2": ListRecord(items=["Python", "<b>SQL"]),
            "span-level-no-id-3": NumericGaugeRecord(display_text="0.25", percentage=25.0),
            "span-language-box__level-no-id-4": NumericGaugeRecord(display_text="50%", percentage=50.0),
        }

    def test_fresh_snapshot_each_call(self, manager):
        regions = EditablePage(PAGE).regions()
        first = manager.collect_snapshot(regions)
        second = manager.collect_snapshot(regions)
        assert first == second
        assert first is not second


class TestRestoreSnapshot:
    def test_round_trip_plain_and_list(self, manager):
        source = EditablePage(PAGE).regions()
        snapshot = manager.collect_snapshot(source)

        target_page = EditablePage(BLANK_PAGE)
        target = target_page.regions()
        restored = manager.restore_snapshot(target, snapshot)

        assert restored == 5
        assert target[0].inner_html == "Jane Doe"
        assert target[1].inner_html == "Builds <b>things</b>."
        assert [li.get_text() for li in target[2].tag.find_all("li")] == ["Python", "<b>SQL"]
        assert target[3].get_attribute("data-percentage-value") == "25"
        assert target[3].text == "0.25"
        assert manager.collect_snapshot(target) == snapshot

    def test_missing_record_leaves_region_untouched(self, manager):
        regions = EditablePage(PAGE).regions()
        before = [r.inner_html for r in regions]
        assert manager.restore_snapshot(regions, {"h1-other-no-id-0": PlainRecord(html="x")}) == 0
        assert [r.inner_html for r in regions] == before

    def test_record_of_wrong_variant_is_ignored(self, manager):
        regions = EditablePage(PAGE).regions()
        snapshot = {"h1-title-no-id-0": ListRecord(items=["a"])}
        assert manager.restore_snapshot(regions, snapshot) == 0
        assert regions[0].inner_html == "Jane Doe"

    def test_keys_survive_transient_classes(self, manager):
        regions = EditablePage(PAGE).regions()
        snapshot = manager.collect_snapshot(regions)

        target = EditablePage(BLANK_PAGE).regions()
        target[0].add_class("editing")
        target[2].add_class("material-wave")
        assert manager.restore_snapshot(target, snapshot) == 5


class TestPersistence:
    def test_save_dedup(self, manager):
        regions = EditablePage(PAGE).regions()
        assert manager.save(manager.collect_snapshot(regions)) is True
        assert manager.save(manager.collect_snapshot(regions)) is False

        regions[0].text = "John Doe"
        assert manager.save(manager.collect_snapshot(regions)) is True

    def test_reload_cycle(self):
        store = MemoryStore()
        first = DataManager(store)
        first.save(first.collect_snapshot(EditablePage(PAGE).regions()))

        second = DataManager(store)
        page = EditablePage(BLANK_PAGE)
        regions = page.regions()
        snapshot = second.load()
        second.restore_snapshot(regions, snapshot)

        assert regions[0].inner_html == "Jane Doe"
        # Nothing changed since load, so nothing to write
        assert second.save(second.collect_snapshot(regions)) is False

    def test_reset_cache(self, manager):
        snapshot = manager.collect_snapshot(EditablePage(PAGE).regions())
        manager.save(snapshot)
        manager.reset_cache()
        assert manager.save(snapshot) is True


class TestNormalization:
    def test_normalize_list_region(self, manager):
        page = EditablePage(
            '<ul data-type="list" contenteditable="true">Alpha<br><div>&lt;i&gt;Beta</div> <li>Gamma</li></ul>'
        )
        region = page.regions()[0]
        manager.normalize_list_region(region)
        assert region.inner_html == "<li>Alpha</li><li>&lt;i&gt;Beta</li><li>Gamma</li>"

    def test_normalize_numeric_region(self, manager):
        page = EditablePage('<span class="level" data-type="number" contenteditable="true">0.5</span>')
        region = page.regions()[0]
        key_before = manager.deriver.derive(region, 0)

        manager.normalize_numeric_region(region)

        assert region.get_attribute("data-original-value") == "0.5"
        assert region.get_attribute("data-percentage-value") == "50"
        assert region.has_class("progress-mode")
        assert region.get_style_property("--progress-width") == "50%"
        assert region.text == ""
        assert manager.deriver.derive(region, 0) == key_before

    def test_normalize_numeric_ignores_stale_cache(self, manager):
        page = EditablePage(
            '<span data-type="number" contenteditable="true" '
            'data-original-value="10%" data-percentage-value="10">90%</span>'
        )
        region = page.regions()[0]
        manager.normalize_numeric_region(region)
        assert region.get_attribute("data-percentage-value") == "90"
        assert region.get_attribute("data-original-value") == "90%"

    def test_normalize_numeric_fallback(self, manager):
        page = EditablePage(
            '<div class="tools-box"><span data-type="number" contenteditable="true">lots</span></div>'
        )
        region = page.regions()[0]
        manager.normalize_numeric_region(region)
        assert region.get_attribute("data-original-value") == "30%"
        assert region.get_attribute("data-percentage-value") == "30"

    def test_gauge_survives_collect(self, manager):
        page = EditablePage('<span data-type="number" contenteditable="true">75,5</span>')
        region = page.regions()[0]
        manager.normalize_numeric_region(region)
        snapshot = manager.collect_snapshot([region])
        assert snapshot == {
            "span-no-class-no-id-0": NumericGaugeRecord(display_text="75,5", percentage=75.5)
        }

    def test_restore_numeric_text(self, manager):
        page = EditablePage('<span data-type="number" contenteditable="true">0.25</span>')
        region = page.regions()[0]
        manager.normalize_numeric_region(region)

        manager.restore_numeric_text(region)
        assert region.text == "0.25"
        assert not region.has_class("progress-mode")
        assert region.get_attribute("style") is None

    def test_restore_numeric_text_without_cache(self, manager):
        region = EditablePage(
            '<span class="language-box__level" data-type="number" contenteditable="true"></span>'
        ).regions()[0]
        manager.restore_numeric_text(region)
        assert region.text == "50%"

        region.set_attribute("data-percentage-value", "42")
        manager.restore_numeric_text(region)
        assert region.text == "42%"

    def test_initialize_numeric_regions(self, manager):
        page = EditablePage(
            '<span data-type="number" contenteditable="true" data-percentage-value="70">7/10</span>'
            '<span data-type="number" contenteditable="true">0.75</span>'
            '<p contenteditable="true">text</p>'
        )
        cached, raw, plain = page.regions()
        manager.initialize_numeric_regions([cached, raw, plain])

        assert cached.has_class("progress-mode")
        assert cached.get_style_property("--progress-width") == "70%"
        assert raw.get_attribute("data-percentage-value") == "75"
        assert raw.has_class("progress-mode")
        assert not plain.has_class("progress-mode")
        assert plain.text == "text"

        # Already in gauge mode: left alone
        style = cached.get_attribute("style")
        manager.initialize_numeric_regions([cached])
        assert cached.get_attribute("style") == style

    def test_restore_redraws_existing_gauge(self, manager):
        page = EditablePage(
            '<span class="level" data-type="number" contenteditable="true">75%</span>'
        )
        regions = page.regions()
        manager.initialize_numeric_regions(regions)
        assert regions[0].get_style_property("--progress-width") == "75%"

        key = manager.deriver.derive(regions[0], 0)
        manager.restore_snapshot(regions, {key: NumericGaugeRecord(display_text="40%", percentage=40.0)})
        manager.initialize_numeric_regions(regions)

        region = regions[0]
        assert region.get_attribute("data-percentage-value") == "40"
        assert region.get_style_property("--progress-width") == "40%"
        assert region.has_class("progress-mode")
        assert region.text == ""


class TestCodecSelection:
    def test_partial_codec_mapping_keeps_defaults(self):
        from pagestate.codec import ListCodec
        from pagestate.types.region import RegionKind

        custom = ListCodec()
        manager = DataManager(MemoryStore(), codecs={RegionKind.LIST: custom})
        assert manager.codecs[RegionKind.LIST] is custom

        regions = EditablePage(PAGE).regions()
        snapshot = manager.collect_snapshot(regions)
        assert snapshot["h1-title-no-id-0"] == PlainRecord(html="Jane Doe")
        assert snapshot["span-level-no-id-3"].percentage == 25.0

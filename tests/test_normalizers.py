"""
Unit tests for row normalization and sidecar serialization.
"""

import pytest
import yaml

from biiif_csv.core.models import DiagnosticReport
from biiif_csv.normalizers.record import (
    COMPOUND_GROUPS,
    extract_compound_group,
    extract_metadata_bag,
    normalize_record,
    parse_float,
    parse_int,
)
from biiif_csv.normalizers.sidecar import dump_document, load_document, write_sidecar


class TestScalarFields:
    """Tests for plain field passthrough."""

    def test_only_present_fields_are_emitted(self):
        """Test that empty and missing values never reach the document."""
        row = {
            "hierarchy": "c/manifest1",
            "label": "Letters",
            "description": "",
            "attribution": "   ",
            "summary": None,
            "navDate": "1901-01-01T00:00:00Z",
        }

        document = normalize_record(row)

        assert document == {"label": "Letters", "navDate": "1901-01-01T00:00:00Z"}

    def test_hierarchy_and_unknown_columns_are_not_emitted(self):
        """Test that non-document columns are left out."""
        document = normalize_record({"hierarchy": "c", "label": "C", "notes": "internal"})

        assert document == {"label": "C"}

    def test_document_key_order(self):
        """Test that keys follow the fixed document layout, not the CSV order."""
        row = {
            "summary": "S",
            "navDate": "D",
            "width": "10",
            "label": "L",
            "metadata.Creator": "X",
            "requiredStatement.value": "V",
            "requiredStatement.label": "Rights",
        }

        document = normalize_record(row)

        assert list(document) == [
            "label",
            "width",
            "navDate",
            "metadata",
            "requiredStatement",
            "summary",
        ]


class TestBehavior:
    """Tests for behavior splitting."""

    def test_comma_list_is_split_and_trimmed(self):
        """Test that comma separated behaviors become a list."""
        document = normalize_record({"behavior": "paged , auto-advance,individuals"})

        assert document["behavior"] == ["paged", "auto-advance", "individuals"]

    def test_single_behavior_stays_a_string(self):
        """Test that a single behavior is passed through."""
        assert normalize_record({"behavior": "paged"})["behavior"] == "paged"


class TestNumericFields:
    """Tests for width, height and duration coercion."""

    def test_coercion(self):
        """Test that numeric cells are converted."""
        document = normalize_record({"width": "1200", "height": 800, "duration": "93.25"})

        assert document == {"width": 1200, "height": 800, "duration": 93.25}
        assert isinstance(document["duration"], float)

    @pytest.mark.parametrize(
        "value, expected",
        [("1200px", 1200), ("12.7", 12), (" 7", 7), (12.9, 12), (5, 5), ("abc", None), (True, None)],
    )
    def test_parse_int(self, value, expected):
        """Test that leading integers are read."""
        assert parse_int(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [("93.25", 93.25), ("10s", 10.0), (".5", 0.5), ("1e2", 100.0), (3, 3.0), ("n/a", None)],
    )
    def test_parse_float(self, value, expected):
        """Test that leading decimals are read."""
        assert parse_float(value) == expected

    def test_unparseable_value_is_dropped_with_warning(self):
        """Test that non-numeric cells are reported and left out."""
        report = DiagnosticReport()

        document = normalize_record({"hierarchy": "c/m", "width": "wide"}, report)

        assert "width" not in document
        assert report.warnings[0].subject == "c/m"
        assert report.warnings[0].source_value == "wide"


class TestMetadataBag:
    """Tests for metadata.<Name> columns."""

    def test_metadata_columns_in_order(self):
        """Test that metadata entries keep CSV column order."""
        row = {
            "metadata.Date": "1901",
            "label": "L",
            "metadata.Creator": "Jane",
            "metadata.Empty": "",
        }

        assert extract_metadata_bag(row) == {"Date": "1901", "Creator": "Jane"}
        assert list(normalize_record(row)["metadata"]) == ["Date", "Creator"]

    def test_dotted_names_keep_their_remainder(self):
        """Test that only the first metadata. prefix is removed."""
        assert extract_metadata_bag({"metadata.Place.Name": "Oslo"}) == {"Place.Name": "Oslo"}

    def test_empty_bag_is_omitted(self):
        """Test that no metadata block is written without values."""
        assert "metadata" not in normalize_record({"metadata.Creator": ""})


class TestCompoundGroups:
    """Tests for dotted compound groups."""

    def test_complete_group_is_emitted(self):
        """Test that a fully specified provider is written."""
        row = {
            "provider.id": "https://example.org",
            "provider.type": "Agent",
            "provider.label": "Example Library",
        }

        assert normalize_record(row)["provider"] == {
            "id": "https://example.org",
            "type": "Agent",
            "label": "Example Library",
        }

    def test_partial_group_is_dropped(self):
        """Test that a provider without a label is left out entirely."""
        row = {"provider.id": "https://example.org", "provider.type": "Agent"}

        assert "provider" not in normalize_record(row)

    def test_blank_sub_key_counts_as_missing(self):
        """Test that an empty sub-key drops the group."""
        row = {"requiredStatement.label": "Rights", "requiredStatement.value": " "}

        assert extract_compound_group(row, "requiredStatement") is None

    def test_services_use_profile(self):
        """Test that services require a profile instead of a label."""
        row = {
            "services.id": "https://example.org/iiif",
            "services.type": "ImageService3",
            "services.profile": "level2",
        }

        assert normalize_record(row)["services"] == {
            "id": "https://example.org/iiif",
            "type": "ImageService3",
            "profile": "level2",
        }

    @pytest.mark.parametrize("group", sorted(COMPOUND_GROUPS))
    def test_every_group_round_trips_from_columns(self, group):
        """Test that each declared group is built from its columns."""
        row = {f"{group}.{sub_key}": f"{group}-{sub_key}" for sub_key in COMPOUND_GROUPS[group]}

        assert normalize_record(row)[group] == {
            sub_key: f"{group}-{sub_key}" for sub_key in COMPOUND_GROUPS[group]
        }


class TestSidecar:
    """Tests for YAML sidecar output."""

    def test_dump_keeps_order_and_unicode(self):
        """Test that YAML output keeps key order and non-ASCII text."""
        text = dump_document({"label": "Ålesund", "behavior": ["paged", "auto-advance"]})

        assert text.splitlines()[0] == "label: Ålesund"
        assert yaml.safe_load(text) == {"label": "Ålesund", "behavior": ["paged", "auto-advance"]}

    def test_write_overwrites(self, tmp_path):
        """Test that an existing sidecar is replaced."""
        (tmp_path / "info.yml").write_text("label: old\nextra: 1\n", encoding="utf-8")

        path = write_sidecar(tmp_path, {"label": "new"})

        assert path == tmp_path / "info.yml"
        assert load_document(path) == {"label": "new"}

    def test_custom_filename(self, tmp_path):
        """Test that the sidecar name can be configured."""
        path = write_sidecar(tmp_path, {"label": "x"}, filename="meta.yml")

        assert path.name == "meta.yml"
